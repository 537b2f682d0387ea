from radio_player.cli import main

main()
