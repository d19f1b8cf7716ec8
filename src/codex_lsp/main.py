from codex_lsp.cli.app import main

if __name__ == "__main__":
    main()
