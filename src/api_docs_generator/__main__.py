from api_docs_generator.cli import main

main()
