class ZmanimError(Exception):
  """Base class for errors raised by shulzmanim."""


class SolarDomainError(ZmanimError):
  """The sun does not set on this date at this location (polar day or night)."""


class CalibrationError(ZmanimError):
  """The reference observation could not be turned into a calibration."""


class ScheduleComputationError(ZmanimError):
  """No sunset was computable for the dates a schedule needs."""


class CalendarLookupError(ZmanimError):
  """The remote calendar answered with an error or an unreadable body."""
