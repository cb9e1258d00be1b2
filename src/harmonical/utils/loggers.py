"""Logging utilities.

All the Harmonical's modules log to the logger named by
L{settings.LOGGING.LOGGER_NAME<harmonical.settings.LOGGING>}. Nothing
is output unless you give it a handler, e.g. using L{init_logging}.

"""
"""
============================== License ========================================
 Copyright (C) 2008, 2010-12 University of Edinburgh, Mark Granroth-Wilding
 
 This file is part of The Harmonical.
 
 The Harmonical is free software: you can redistribute it and/or modify
 it under the terms of the GNU General Public License as published by
 the Free Software Foundation, either version 3 of the License, or
 (at your option) any later version.
 
 The Harmonical is distributed in the hope that it will be useful,
 but WITHOUT ANY WARRANTY; without even the implied warranty of
 MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
 GNU General Public License for more details.
 
 You should have received a copy of the GNU General Public License
 along with The Harmonical.  If not, see <http://www.gnu.org/licenses/>.

============================ End license ======================================

"""
__author__ = "Mark Granroth-Wilding <mark.granroth-wilding@ed.ac.uk>"

import logging

from harmonical import settings

def init_logging(log_level=None, stream=None):
    """
    Set up the main logger to output messages to the console, so that
    you can see what the data structures are doing, e.g. how many
    passes L{IntervalSet.densify<harmonical.data.intervals.IntervalSet.densify>}
    takes. Calling this again doesn't add another handler, but it does
    change the log level.

    @param log_level: one of the level constants in L{logging}. If None,
        the logger's level is left as it is.
    @param stream: stream to write to. Defaults to stderr.
    @return: the main logger

    """
    # Get a logger to configure from the logging system:
    #  will get the same one when logging later.
    logger = logging.getLogger(settings.LOGGING.LOGGER_NAME)
    if log_level is not None:
        logger.setLevel(log_level)

    for handler in logger.handlers:
        if getattr(handler, "_harmonical_console", False):
            # Already set up: just point it at the new stream
            if stream is not None:
                handler.setStream(stream)
            return logger

    # Create a console handler to output message to the console
    chandler = logging.StreamHandler(stream)
    chandler._harmonical_console = True
    chandler.setLevel(logging.DEBUG)
    # Format the logging messages thusly
    formatter = logging.Formatter(settings.LOGGING.CONSOLE_FORMAT)
    chandler.setFormatter(formatter)

    # Add the console handler to the logger
    logger.addHandler(chandler)
    return logger
