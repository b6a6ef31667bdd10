"""Run the client with `python -m tox_ws_client`."""

from .cli import main

if __name__ == "__main__":
    main()
