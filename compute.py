#!/usr/bin/env python

import sys

from trisphere.cli import main


sys.exit(main())
