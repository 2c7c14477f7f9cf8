from exprtree.cli import main

main()
