"""Entry point for running the Angelscript workspace tools from a checkout."""

from ue_angelscript.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
