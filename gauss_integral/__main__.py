import sys

from gauss_integral.run import main


if __name__ == "__main__":
    sys.exit(main())
