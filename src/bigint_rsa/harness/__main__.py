import sys

from bigint_rsa.harness.batch import main

sys.exit(main())
