from srch.cli import main

main()
