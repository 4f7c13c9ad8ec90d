from restaurant_pos.main import main

main()
