class DataFormatError(ValueError):
    """
    Raised when a table cannot be used as a patient cohort, e.g. a required column is missing
    """


class ConfigurationError(ValueError):
    """
    Raised when a pipeline step is asked to do something undefined, e.g. a stratified split on a single class
    """
