class GeneratorError(Exception):
    """Base class for every failure of the device table generator."""


class NetworkError(GeneratorError):
    pass


class UnexpectedStatusError(GeneratorError):
    def __init__(self, status_code, url):
        super().__init__(f"got status code {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class MarkerNotFoundError(GeneratorError):
    def __init__(self, marker):
        super().__init__(f"could not find {marker}")
        self.marker = marker


class DecodeError(GeneratorError):
    pass


class FormatError(GeneratorError):
    pass


class WriteError(GeneratorError):
    pass


class ConfigError(GeneratorError):
    pass
