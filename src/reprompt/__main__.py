from reprompt.cli.main import main

main()
