import logging
import os
import sys

import click
import fire

from rotcli.cli.rotate import RotateCommand

# Init logging
logging.basicConfig(level=os.environ.get("LOGLEVEL", "INFO").upper())

log = logging.getLogger("rotcli.main")

COMMANDS = {
    "cli": RotateCommand(),
}


def main():
    log.debug(f"main: {sys.argv[1:]}")
    try:
        # if the command returns an int, then we serialize it as none to prevent fire from printing it
        # (this does not change the actual return value, so it's still good to use as an exit code)
        ret = fire.Fire(COMMANDS["cli"], name="rot13", serialize=lambda r: None if isinstance(r, int) else r)

        if isinstance(ret, int):
            sys.exit(ret)

    except KeyboardInterrupt:
        click.secho("\n[Ctrl-C] Aborting.", fg="red")
        sys.exit(2)


if __name__ == "__main__":
    main()
