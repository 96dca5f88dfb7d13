from kandilli_quake.cli import main

main()
