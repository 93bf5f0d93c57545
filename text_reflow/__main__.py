"""Package entry point for ``python -m text_reflow``.

Delegates to the CLI's main(); see text_reflow/cli.py for the options.
"""

from text_reflow.cli import main

if __name__ == "__main__":
    main()
