from .nativeversioninfo import main

main()
