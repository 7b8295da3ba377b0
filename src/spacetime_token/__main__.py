"""Allow running as ``python -m spacetime_token``."""

from spacetime_token.cli.main import main

if __name__ == "__main__":
    main()
