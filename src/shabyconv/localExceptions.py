class ShabyconvException(Exception):
    pass


class ConversionFailure(ShabyconvException):
    pass
