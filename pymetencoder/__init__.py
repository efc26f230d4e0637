################################################################################
# pymetencoder/__init__.py
#
# Main __init__ script for pymetencoder
#
# 2026-10-19:
#   * First version
################################################################################
# IMPORTS
################################################################################
import json, logging, re
from collections.abc import Mapping
from . import conversion
################################################################################
# EXCEPTION CLASSES
################################################################################
class EncodeError(Exception):
    def __init__(self, msg):
        self.msg = "encoding error: {}".format(msg)
        super().__init__(self.msg)
class UnencodableRecord(EncodeError):
    """
    Raised when the observation record lacks information that cannot be
    defaulted (e.g. the station number). Data entry collaborators should
    prompt for correction rather than submit the report.
    """
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__("record is missing {}".format(", ".join(self.missing)))
class InvalidCode(Exception):
    def __init__(self, val, desc):
        self.msg = "{} is not a valid code for {}".format(val, desc)
        super().__init__(self.msg)
################################################################################
# BASE CLASSES
################################################################################
class Report(object):
    """
    Base class for a meteorological report
    """
    def encode(self, data, **kwargs):
        """
        Encode function
        """
        if data is None or not isinstance(data, Mapping):
            raise EncodeError("observation record must be a mapping, not {}".format(type(data).__name__))
        try:
            return self._encode(data, **kwargs)
        except EncodeError:
            raise
        except Exception as e:
            raise EncodeError(str(e))
    def _encode(self, data, **kwargs):
        """
        Actual encode function. Implement in subclass
        """
        raise NotImplementedError("_encode needs to be implemented in {} subclass".format(type(self).__name__))
class Observation(object):
    """
    Base class for an Observation. Each subclass encodes one WMO group (or one
    component of a group) and declares its own default through _ENCODE_DEFAULT.
    If no default is declared, the default is the null character repeated
    _CODE_LEN times.

    :param string null_char: Character used for a missing figure
    """
    def __init__(self, null_char="/"):
        self.null_char = null_char
        if hasattr(self, "_CODE_LEN") and not hasattr(self, "_ENCODE_DEFAULT"):
            self._ENCODE_DEFAULT = null_char * self._CODE_LEN
    def encode(self, raw, **kwargs):
        """
        Encodes observation into a coded value

        :param anything raw: Value (or dict of values) to encode
        :param string group: Prefix to prepend to the code (e.g. "1" for 1SnTTT)
        :returns: Encoded value
        :rtype: string
        """
        group = kwargs.pop("group", None)
        try:
            if not self.is_available(raw):
                val = self._ENCODE_DEFAULT
            else:
                val = self._encode(raw, **kwargs)
        except NotImplementedError:
            raise
        except conversion.ConversionError as e:
            logging.warning(str(e))
            val = self._ENCODE_DEFAULT
        except InvalidCode as e:
            logging.warning("{}. Using {}".format(str(e), self._ENCODE_DEFAULT))
            val = self._ENCODE_DEFAULT
        except (ValueError, TypeError, KeyError, IndexError):
            logging.warning("No valid {} ({}). Using {}".format(type(self).__name__, raw, self._ENCODE_DEFAULT))
            val = self._ENCODE_DEFAULT

        # Return output
        if group is None:
            return val
        return "{}{}".format(group, val)
    def _encode(self, data, **kwargs):
        """
        Actual encode function. Mostly implemented in subclasses
        """
        if not hasattr(self, "_COMPONENTS"):
            return self._encode_value(data, **kwargs)
        else:
            retval = []
            for (attr, obs_class) in self._COMPONENTS:
                retval.append(obs_class(null_char=self.null_char).encode(lookup(data, attr)))
            return "".join(retval)
    def is_available(self, value):
        """
        Checks if the value is available

        :param anything value: Value to check
        :returns: False if value is None, empty or a dict with a None value
        :rtype: boolean
        """
        if is_missing(value):
            return False
        if isinstance(value, dict) and "value" in value:
            return self.is_available(value["value"])
        return True
    def is_null(self, value):
        """
        Checks if the value is made up entirely of null characters (e.g. "//")
        """
        return isinstance(value, str) and value.count(self.null_char) == len(value)
    def is_valid(self, value):
        """
        Checks the value against _VALID_RANGE, if present
        """
        if hasattr(self, "_VALID_RANGE"):
            return self._VALID_RANGE[0] <= value <= self._VALID_RANGE[1]
        return True
    def _encode_value(self, data, **kwargs):
        val = data["value"] if isinstance(data, dict) else data

        # An observer may enter "/" for a figure that could not be observed
        if self.is_null(str(val).strip()):
            return self.null_char * self._CODE_LEN

        # Convert to a number and check it
        num = conversion.to_number(val)
        if num is None:
            raise InvalidCode(val, type(self).__name__)
        num = self._encode_convert(num, **kwargs)
        if not self.is_valid(num):
            raise InvalidCode(val, type(self).__name__)

        # Return code
        return conversion.zero_pad(num, self._CODE_LEN)
    def _encode_convert(self, val, **kwargs):
        return val

    def __repr__(self):
        return "{}({})".format(type(self).__name__, vars(self))
    def __str__(self):
        return self.__repr__()
class ObsEncoder(json.JSONEncoder):
    def default(self, o):
        if hasattr(o, "to_dict"):
            return o.to_dict()
        return o.__dict__
################################################################################
# FUNCTIONS
################################################################################
def lookup(data, path):
    """
    Returns the value at path in a nested record, or None if any part of the
    path is missing

    :param dict data: Record to search
    :param string/tuple path: Key, or tuple of keys/list indices
    """
    if not isinstance(path, tuple):
        path = (path,)
    d = data
    for p in path:
        if d is None:
            return None
        if isinstance(p, int):
            if not isinstance(d, (list, tuple)) or p >= len(d):
                return None
            d = d[p]
        elif isinstance(d, Mapping):
            d = d.get(p)
        else:
            return None
    return d
def is_missing(value):
    """
    True if value is None or an empty/blank string
    """
    return value is None or (isinstance(value, str) and re.match(r"^\s*$", value) is not None)
