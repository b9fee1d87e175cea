import argparse

from ._version import __version__

parser = argparse.ArgumentParser(
    description='Convert NIST SHA byte test vectors (.rsp) into rstest cases')
add = parser.add_argument
add(
    '--dir', '-d',
    dest='vectorDir',
    action='store',
    type=str,
    help='Directory holding SHA256ShortMsg.rsp and SHA256LongMsg.rsp',
    default='.',
)
add(
    '--outdir',
    dest='outputDir',
    action='store',
    type=str,
    help='Directory in which to place shortcases.txt and longcases.txt',
    default='.',
)
add(
    '--quiet', '-q',
    dest='quiet',
    action='store_true',
    help='Only log warnings and errors',
    default=False,
)
add('--version',
    action='version',
    version='shabyconv ' + __version__)

args = None


def arg(key):
    global args
    if args is None:
        args, _ = parser.parse_known_args()
    return vars(args)[key]
