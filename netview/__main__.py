from netview.cli import main

main()
