def render_rstest_case(name: str, msg: str, digest: str) -> str:
    """renders one rstest case line, e.g. case::len8( "ab", "cd" ),

    msg and digest are hex strings and are not escaped.
    """
    return f'case::{name}( "{msg}", "{digest}" ),'
