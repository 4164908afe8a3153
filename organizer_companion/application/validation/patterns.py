"""
Regular expressions behind the validation rules.

Every pattern must match the whole value (re.fullmatch).
"""

import re
from typing import Dict

from organizer_companion.domain.value_objects import SupportedDatabase

# Word runs joined by single . or - separators
EMAIL_PATTERN = r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*(?:\.\w{2,3})+$"
# e.g. d36ddcfd-5161-4c20-80aa-b312ef161433
GUID_PATTERN = (
    r"(^([0-9A-Fa-f]{8}[-][0-9A-Fa-f]{4}[-][0-9A-Fa-f]{4}[-][0-9A-Fa-f]{4}"
    r"[-][0-9A-Fa-f]{12})$)"
)
# 4 to 20 characters with a digit, a lower-case and an upper-case letter and one of
# ! @ # $ % ^ & * + = ? - _ . ,
PASSWORD_PATTERN = r"^(?=.*\d)(?=.*[a-z])(?=.*[A-Z])(?=.*[!@#$%^&*+=?\-_.,]).{4,20}$"
# At least 4 characters: letters, digits and ! @ # $ % ^ & * + = < > ? _ . , -
USER_NAME_PATTERN = r"^[a-zA-Z0-9!@#$%^&*+=<>?_.,-]{4,}$"
URL_PATTERN = (
    r"^(ht|f)tp(s?)\:\/\/[0-9a-zA-Z](?:[-.\w]*[0-9a-zA-Z])?(:(0-9)*)*(\/?)"
    r"([a-zA-Z0-9\-\.\?\,\'\/\\\+&%\$#_=]*)?$"
)
# US, Canada, Mexico and the Caribbean; optional country code, area code and extension
NANP_PHONE_NUMBER_PATTERN = (
    r"^(\+(1|52)[- ]?)?(\(?\d{2,3}\)?[- ]?)?[\d\- ]{7,10}"
    r"(\s*(ext|x|extension)\s*\d{1,5})?$"
)

SQL_SERVER_CONNECTION_PATTERN = r"^([a-zA-Z][\w\s]*=[^;]*(;|$))+$"
SQLITE_CONNECTION_PATTERN = (
    r"^Data Source=[^;]+(;Version=\d+)?(;Cache=(Shared|Private))?"
    r"(;Mode=(ReadOnly|ReadWrite|ReadWriteCreate))?(;Password=[^;]+)?"
    r"(;Pooling=(True|False))?(;Max Pool Size=\d+)?(;Min Pool Size=\d+)?"
    r"(;Synchronous=(Off|Normal|Full))?"
    r"(;Journal Mode=(Delete|Truncate|Persist|Memory|WAL))?"
    r"(;Foreign Keys=(True|False))?(;Busy Timeout=\d+)?$"
)
MYSQL_CONNECTION_PATTERN = (
    r"^((Server|Data Source|Host|Address|Addr|Network)=.+;)?((Port)=\d+;)?"
    r"((Database|Initial Catalog)=.+;)?((User ID|UID)=.+;)?((Password|PWD)=.+;)?"
    r"((Pooling)=(True|False);)?((Min Pool Size)=\d+;)?((Max Pool Size)=\d+;)?"
    r"((Connection Timeout|Connect Timeout)=\d+;)?"
    r"((Ssl Mode)=(None|Preferred|Required|VerifyCA|VerifyFull);)?"
    r"((Charset)=.+;)?((Allow User Variables)=(True|False);)?"
    r"((Convert Zero Datetime)=(True|False);)?((Default Command Timeout)=\d+;)?$"
)
POSTGRESQL_CONNECTION_PATTERN = (
    r"^((Host|Server)=.+;)?((Port)=\d+;)?((Database|Initial Catalog)=.+;)?"
    r"((User ID|Username|UID)=.+;)?((Password|PWD)=.+;)?((Pooling)=(True|False);)?"
    r"((Min Pool Size)=\d+;)?((Max Pool Size)=\d+;)?"
    r"((Timeout|Connection Timeout|Command Timeout)=\d+;)?"
    r"((SSL Mode)=(Disable|Allow|Prefer|Require|VerifyCA|VerifyFull);)?"
    r"((Search Path)=.+;)?((Application Name)=.+;)?$"
)

EMAIL_REGEX = re.compile(EMAIL_PATTERN)
GUID_REGEX = re.compile(GUID_PATTERN)
PASSWORD_REGEX = re.compile(PASSWORD_PATTERN)
USER_NAME_REGEX = re.compile(USER_NAME_PATTERN)
URL_REGEX = re.compile(URL_PATTERN)
NANP_PHONE_NUMBER_REGEX = re.compile(NANP_PHONE_NUMBER_PATTERN)

# Connection strings are matched case-insensitively
CONNECTION_STRING_REGEXES: Dict[SupportedDatabase, re.Pattern] = {
    SupportedDatabase.SQL_SERVER: re.compile(SQL_SERVER_CONNECTION_PATTERN, re.IGNORECASE),
    SupportedDatabase.SQLITE: re.compile(SQLITE_CONNECTION_PATTERN, re.IGNORECASE),
    SupportedDatabase.MYSQL: re.compile(MYSQL_CONNECTION_PATTERN, re.IGNORECASE),
    SupportedDatabase.POSTGRESQL: re.compile(
        POSTGRESQL_CONNECTION_PATTERN, re.IGNORECASE
    ),
}
