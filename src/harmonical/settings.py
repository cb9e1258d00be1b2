"""Global settings for the Harmonical.

This module is imported by other modules to access global settings.
Values are read at call time, so overriding one of these constants
(e.g. in a test) takes effect immediately.

"""

class RATIOS:
    """
    Settings for turning inputs into exact ratios.

    """
    # Floats are approximated by the closest fraction whose denominator
    #  doesn't exceed this
    MAX_DENOMINATOR = 10000000

class HARMONIC:
    # Used when a harmonic is created without an amplitude or phase
    DEFAULT_AMPLITUDE = 1.0
    DEFAULT_PHASE = 0.0

class INTERVALS:
    # 1200 cents to the octave (ratio 2/1)
    CENTS_PER_OCTAVE = 1200

class LOGGING:
    # All modules log to this logger
    LOGGER_NAME = "main_logger"
    # Console format for init_logging()
    CONSOLE_FORMAT = "%(levelname)s: %(message)s"
