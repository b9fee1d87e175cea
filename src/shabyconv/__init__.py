from ._version import __version__
from .converter import convert, shabytest
from .render import render_rstest_case
