#!/usr/bin/env python3
"""
catforth - A concatenative, Forth-like virtual machine

Usage:
1. Interactive REPL:      python main.py repl
2. Run a source file:     python main.py program.fth
3. Run source text:       python main.py -e '1 2 add print'
4. Python DSL session:    python main.py (or python -i main.py)

Add -v for debug logging.
"""

import logging
import sys

from catforth import ForthException, InteractiveForth


def create_forth():
    """Create a new VM instance"""
    return InteractiveForth()


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    level = logging.WARNING
    if '-v' in args:
        args.remove('-v')
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not args:
        f = create_forth()
        print("VM instance available as 'f'")
        print("  f(1, 2).word('add', 'print')")
        print("  f.execute('1 2 add print')")
        print("  f.repl()")
        import code
        code.interact(local={'f': f}, banner="")
        return 0

    arg = args[0]
    f = create_forth()
    try:
        if arg == 'repl':
            f.repl()
        elif arg == '-e' and len(args) > 1:
            f.execute(' '.join(args[1:]))
        elif arg.endswith('.fth') or arg.endswith('.forth'):
            with open(arg, 'r') as file:
                f.execute(file.read())
        else:
            print(f"Unrecognized argument: {arg}")
            print(__doc__)
            return 2
    except ForthException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
