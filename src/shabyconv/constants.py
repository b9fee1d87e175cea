LEN = 'Len ='
MSG = 'Msg ='
MD = 'MD ='

# NIST writes the empty message as a single 00 byte
ZERO_LENGTH = 'Len = 0'

CONVERSIONS = [
    ('SHA256ShortMsg.rsp', 'shortcases.txt'),
    ('SHA256LongMsg.rsp', 'longcases.txt'),
]
