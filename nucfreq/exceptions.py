class NucfreqError(Exception):
    """Base exception for nucfreq"""
    pass


class InvalidNucleotideError(NucfreqError, ValueError):
    """Raised when a value is not one of the DNA nucleotides A, C, G, T"""
    pass


class NormalizationError(NucfreqError, ValueError):
    """Raised when counts cannot be normalized (zero factor, unknown mode)"""
    pass


class InputFormatError(NucfreqError):
    """Raised for invalid or unsupported sequence input"""
    pass


class ConfigError(NucfreqError):
    """Raised for a missing or malformed config file"""
    pass
