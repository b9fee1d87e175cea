import os
from typing import Callable, Iterator, List, Tuple

from .constants import LEN, MSG, MD, ZERO_LENGTH
from .localExceptions import ConversionFailure
from .render import render_rstest_case


def cases(testdata: str) -> Iterator[Tuple[str, str, str]]:
    """yields (name, msg, digest) every time an MD line is seen

    Fields are never reset between records, so a record missing a
    Len or Msg line reuses the values of the record before it.

    Args:
        testdata (str): contents of a .rsp file
    """
    name, msg, digest = '', '', ''
    lenLine = ''

    for line in testdata.split('\n'):
        line = line.strip()

        # every prefix is followed by a single space before the value
        if line.startswith(LEN):
            lenLine = line
            name = 'len' + line[len(LEN) + 1:]
        elif line.startswith(MSG):
            msg = line[len(MSG) + 1:]
            if lenLine == ZERO_LENGTH:
                msg = ''
        elif line.startswith(MD):
            digest = line[len(MD) + 1:]
            yield name, msg, digest


def rendered(
    testdata: str,
    render: Callable[[str, str, str], str] = render_rstest_case,
) -> List[str]:
    """renders every test case in testdata, one entry per case"""
    return [render(*case) for case in cases(testdata)]


def shabytest(
    testdata: str,
    render: Callable[[str, str, str], str] = render_rstest_case,
) -> str:
    """renders every test case in testdata, one newline-terminated line each"""
    return ''.join(line + '\n' for line in rendered(testdata, render))


def convert(
    inpath: str,
    outpath: str,
    render: Callable[[str, str, str], str] = render_rstest_case,
) -> int:
    """converts the .rsp file at inpath, overwriting outpath

    Args:
        inpath (str): source .rsp file, read as UTF-8
        outpath (str): destination, replaced if it exists
        render (Callable): turns (name, msg, digest) into one line

    Returns:
        int: number of test cases written
    """
    if not os.path.exists(inpath):
        raise FileNotFoundError(inpath)

    try:
        with open(inpath, 'r', encoding='utf-8') as file:
            testdata = file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConversionFailure(f'could not read "{inpath}": {e}') from e

    lines = rendered(testdata, render)

    try:
        with open(outpath, 'w', encoding='utf-8') as file:
            file.write(''.join(line + '\n' for line in lines))
    except OSError as e:
        raise ConversionFailure(f'could not write "{outpath}": {e}') from e

    return len(lines)
