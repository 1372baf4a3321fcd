import sys

from course_advisor.main import main

sys.exit(main())
