import sys
from types import SimpleNamespace

from flagship import Registry, Ref

settings = SimpleNamespace()
asked = Ref(False)

options = Registry("usage: main.py [options] FILE...\n\n")
options.add((settings, "count"), "c", "count", "number of passes over the input", 1)
options.add((settings, "ratio"), "r", "ratio", "sampling ratio applied to every pass", 0.5, "tuning")
options.add((settings, "output"), "o", "output", "where to write the report", "", "io")
options.add((settings, "seed"), None, "seed", "random seed (0 picks one from the clock)", 0, "tuning")
options.add_switch((settings, "verbose"), "v", "verbose", "print progress while working")
options.add_switch(asked, "h", "help", "show this text and exit")


if __name__ == '__main__':
    if not options.parse():
        options.print_faults()
        options.print_usage()
        sys.exit(2)
    if asked.value:
        options.print_usage(sys.stdout)
        sys.exit(0)
    print(vars(settings), options.operands)
