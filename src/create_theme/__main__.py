from create_theme.cli import main

if __name__ == "__main__":
    main()
