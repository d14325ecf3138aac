# File: src/model/login_model.py
import logging
import re
from dataclasses import dataclass
from typing import NamedTuple, Union

from PyQt5.QtCore import QObject, pyqtSignal

from form_schema import (FORM_SCHEMA, FIELD_ORDER, BACKSPACE,
                         PASSWORD_COMPLEXITY, PASSWORD_COMPLEXITY_MESSAGE)

logger = logging.getLogger(__name__)

_ALLOWED = {field: re.compile(rules["allowed"]) for field, rules in FORM_SCHEMA.items()}
_PASSWORD_RE = re.compile(PASSWORD_COMPLEXITY)


class Credentials(NamedTuple):
    username: str
    password: str


@dataclass(frozen=True)
class Accepted:
    username: str
    password: str

    @property
    def accepted(self):
        return True

    def credentials(self):
        return Credentials(self.username, self.password)


@dataclass(frozen=True)
class Rejected:
    message: str

    @property
    def accepted(self):
        return False


@dataclass(frozen=True)
class CancelSignal:
    pass


ValidationResult = Union[Accepted, Rejected]


def _rules(field):
    rules = FORM_SCHEMA.get(field)
    if rules is None:
        raise ValueError(f"未知的表单字段: {field!r}")
    return rules


def is_allowed_character(field: str, char: str, current_length: int = 0) -> bool:
    """判断字符 char 能否输入到字段 field 中。

    退格键始终放行。其他字符按字段允许的字符集和最大长度判断,
    current_length 为输入前字段已有的长度。
    """
    rules = _rules(field)
    if char == BACKSPACE:
        return True
    if len(char) != 1:
        return False
    if current_length >= rules["max_length"]:
        return False
    return _ALLOWED[field].fullmatch(char) is not None


def validate(username: str, password: str) -> ValidationResult:
    """点击确定时校验两个字段。

    规则按固定顺序检查, 第一条不满足的规则决定提示信息。
    """
    values = {"username": username, "password": password}
    for field in FIELD_ORDER:
        rules = FORM_SCHEMA[field]
        value = values[field]
        if value == "":
            logger.debug("字段 '%s' 为空", field)
            return Rejected(rules["empty_message"])
        if len(value) < rules["min_length"]:
            logger.debug("字段 '%s' 少于 %d 位", field, rules["min_length"])
            return Rejected(rules["too_short_message"])

    # 用户名不做字符复杂度校验, 只有密码需要
    if _PASSWORD_RE.fullmatch(password) is None:
        logger.debug("密码复杂度不满足要求")
        return Rejected(PASSWORD_COMPLEXITY_MESSAGE)

    return Accepted(username, password)


def on_keystroke(field: str, char: str, current: str = "") -> bool:
    return is_allowed_character(field, char, len(current))


def on_submit(username: str, password: str) -> ValidationResult:
    return validate(username, password)


def on_cancel() -> CancelSignal:
    return CancelSignal()


class LoginModel(QObject):
    validation_failed = pyqtSignal(str)

    def __init__(self):
        super().__init__()
        self.username = ""
        self.password = ""

    def set_value(self, field, text):
        _rules(field)
        setattr(self, field, text)

    def on_keystroke(self, field, char, current=None):
        _rules(field)
        if current is None:
            current = getattr(self, field)
        return on_keystroke(field, char, current)

    def on_submit(self):
        result = on_submit(self.username, self.password)
        if not result.accepted:
            self.validation_failed.emit(result.message)
        return result

    def on_cancel(self):
        return on_cancel()
