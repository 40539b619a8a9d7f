import sys

from advent_of_code.day1 import main

sys.exit(main())
