from flipfish.main import main

main()
