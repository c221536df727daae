"""
Modules package initialization.
This package contains all the functional modules of the application.
"""

from bloglist.modules import auth
from bloglist.modules import authors
from bloglist.modules import posts
from bloglist.modules import stats
