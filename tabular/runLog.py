# Copyright 2024 TerraPower, LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
This module handles logging of console output (e.g. warnings, information, errors) from tabular.

The default way of calling the global tabular logger is to just import it:

.. code::

    from tabular import runLog

You can then log things:

.. code::

    runLog.info('information here')
    runLog.error('extra error info here')
    raise SomeException  # runLog.error() implies that the code will crash!

Or change the log level:

.. code::

    runLog.setVerbosity('debug')

Everything is written to ``sys.stderr``, so log lines never end up inside a table that a caller is
printing to ``sys.stdout``.
"""
import collections
import logging
import operator
import sys

# global constants
_WHITE_SPACE = " " * 6
LOGGER_NAME = "TABULAR"


class _RunLog:
    """
    Handles all the logging.

    Holds the named verbosity levels, their short printed prefixes, and the current verbosity.
    """

    def __init__(self, stream=None):
        """
        Build a log object.

        Parameters
        ----------
        stream : file-like, optional
            Where log records are written. Defaults to ``sys.stderr``.
        """
        self._verbosity = logging.WARNING
        self.logLevels = None
        self._logLevelNumbers = []
        self._setLogLevels()
        self.logger = RunLogger(LOGGER_NAME, stream=stream)
        self.setVerbosity(self._verbosity)

    def _setLogLevels(self):
        """Fill the logLevels dict with the custom level names and their printed prefixes."""
        self.logLevels = collections.OrderedDict(
            [
                ("debug", (logging.DEBUG, "[dbug] ")),
                ("extra", (15, "[xtra] ")),
                ("info", (logging.INFO, "[info] ")),
                ("important", (25, "[impt] ")),
                ("warning", (logging.WARNING, "[warn] ")),
                ("error", (logging.ERROR, "[err ] ")),
                ("header", (100, "")),
            ]
        )
        self._logLevelNumbers = sorted([l[0] for l in self.logLevels.values()])
        global _WHITE_SPACE
        _WHITE_SPACE = " " * len(max([l[1] for l in self.logLevels.values()], key=len))

        for logValue, shortLogString in self.logLevels.values():
            logging.addLevelName(logValue, shortLogString)

    def log(self, msgType, msg, single=False, label=None):
        """
        This is a wrapper around logger.log() that is used by all message passers (info, warning...).

        It turns the level name into a level number and passes the de-duplication info along.
        """
        msgLevel = msgType if isinstance(msgType, int) else self.logLevels[msgType][0]
        self.logger.log(msgLevel, str(msg), single=single, label=label)

    def getDuplicatesFilter(self):
        """Find the no-duplicates filter on the logger, if there is one."""
        return self.logger.getDuplicatesFilter()

    def clearSingleWarnings(self):
        """Reset the single warned list so we get messages again."""
        dupsFilter = self.getDuplicatesFilter()
        if dupsFilter:
            dupsFilter.singleMessageCounts.clear()
            dupsFilter.singleWarningMessageCounts.clear()

    def warningReport(self):
        """Summarize all de-duplicated warnings."""
        self.logger.warningReport()

    def getLogVerbosityRank(self, level):
        """Return integer verbosity rank given the string verbosity name."""
        try:
            return self.logLevels[level][0]
        except KeyError:
            logStrs = list(self.logLevels.keys())
            raise KeyError("{} is not a valid verbosity level: {}".format(level, logStrs))

    def setVerbosity(self, level):
        """
        Sets the minimum output verbosity for the logger.

        Parameters
        ----------
        level : int or str
            The level to set the log output verbosity to. Valid strings are keys of logLevels.
            Integers that are not one of the known levels snap down to the nearest known level.

        Examples
        --------
        >>> setVerbosity('debug') -> sets to 10
        >>> setVerbosity(0) -> sets to 10
        """
        if isinstance(level, str):
            self._verbosity = self.getLogVerbosityRank(level)
        elif isinstance(level, int) and not isinstance(level, bool):
            # the logging module silently drops records at unusual levels, so snap to a known one
            if level in self._logLevelNumbers:
                self._verbosity = level
            elif level < self._logLevelNumbers[0]:
                self._verbosity = self._logLevelNumbers[0]
            else:
                for i in range(len(self._logLevelNumbers) - 1, -1, -1):
                    if level >= self._logLevelNumbers[i]:
                        self._verbosity = self._logLevelNumbers[i]
                        break
        else:
            raise TypeError("Invalid verbosity rank {}.".format(level))

        for handler in self.logger.handlers:
            handler.setLevel(self._verbosity)
        self.logger.setLevel(self._verbosity)

    def getVerbosity(self):
        """Return the global runLog verbosity."""
        return self._verbosity


# Here are all the module-level functions that should be used for most outputs.
# They use the Log object behind the scenes.
def extra(msg, single=False, label=None):
    LOG.log("extra", msg, single=single, label=label)


def debug(msg, single=False, label=None):
    LOG.log("debug", msg, single=single, label=label)


def info(msg, single=False, label=None):
    LOG.log("info", msg, single=single, label=label)


def important(msg, single=False, label=None):
    LOG.log("important", msg, single=single, label=label)


def warning(msg, single=False, label=None):
    LOG.log("warning", msg, single=single, label=label)


def error(msg, single=False, label=None):
    LOG.log("error", msg, single=single, label=label)


def header(msg, single=False, label=None):
    LOG.log("header", msg, single=single, label=label)


def warningReport():
    LOG.warningReport()


def setVerbosity(level):
    LOG.setVerbosity(level)


def getVerbosity():
    return LOG.getVerbosity()


def getLogVerbosityRank(level):
    return LOG.getLogVerbosityRank(level)


# ---------------------------------------


class DeduplicationFilter(logging.Filter):
    """
    Important logging filter.

    * allow users to turn off duplicate warnings
    * handles special indentation rules for our logs
    """

    def __init__(self, *args, **kwargs):
        logging.Filter.__init__(self, *args, **kwargs)
        self.singleMessageCounts = {}
        self.singleWarningMessageCounts = {}

    def filter(self, record):
        msg = str(record.msg)
        single = getattr(record, "single", False)
        label = getattr(record, "label", msg)
        label = msg if label is None else label

        if single:
            if record.levelno in (logging.WARNING, logging.CRITICAL):
                counts = self.singleWarningMessageCounts
            else:
                counts = self.singleMessageCounts

            if label in counts:
                counts[label] += 1
                return False
            counts[label] = 1

        # indent continuation lines of multi-line messages under the level prefix
        record.msg = msg.rstrip().replace("\n", "\n" + _WHITE_SPACE)
        return True


class RunLogger(logging.Logger):
    """Custom Logger that gives callers the option to de-duplicate messages."""

    FMT = "%(levelname)s%(message)s"

    def __init__(self, name, stream=None):
        logging.Logger.__init__(self, name)
        self.allowStopDuplicates()

        handler = logging.StreamHandler(sys.stderr if stream is None else stream)
        handler.setFormatter(logging.Formatter(RunLogger.FMT))
        self.addHandler(handler)

    def log(self, level, msg, single=False, label=None):
        """Log ``msg`` at ``level``, passing the de-duplication info through to the filter."""
        logging.Logger.log(self, level, str(msg), extra={"single": single, "label": label})

    def allowStopDuplicates(self):
        """Helper method to allow us to safely add the deduplication filter at any time."""
        for f in self.filters:
            if isinstance(f, DeduplicationFilter):
                return
        self.addFilter(DeduplicationFilter())

    def getDuplicatesFilter(self):
        """This object should have a no-duplicates filter. If it exists, find it."""
        for f in self.filters:
            if isinstance(f, DeduplicationFilter):
                return f

        return None

    def warningReport(self):
        """Summarize all de-duplicated warnings."""
        self.log(logging.WARNING, "----- Final Warning Count --------")
        self.log(logging.WARNING, "  {0:^10s}   {1:^25s}".format("COUNT", "LABEL"))

        dupsFilter = self.getDuplicatesFilter()
        if dupsFilter is None or not dupsFilter.singleWarningMessageCounts:
            self.log(logging.WARNING, "  {0:^10s}   {1:^25s}".format(str(0), "None Found"))
            self.log(logging.WARNING, "------------------------------------")
            return

        for label, count in sorted(
            dupsFilter.singleWarningMessageCounts.items(), key=operator.itemgetter(1)
        ):
            self.log(logging.WARNING, "  {0:^10s}   {1:^25s}".format(str(count), str(label)))
        self.log(logging.WARNING, "------------------------------------")


# ---------------------------------------


def logFactory():
    """Create the default logging object."""
    return _RunLog()


LOG = logFactory()
