# File: src/view/login_view.py
from PyQt5.QtWidgets import (QDialog, QDialogButtonBox, QVBoxLayout,
                             QLineEdit, QFormLayout)
from PyQt5.QtGui import QValidator
from PyQt5.QtCore import pyqtSignal

from form_schema import (FORM_SCHEMA, FIELD_ORDER, WINDOW_TITLE,
                         WINDOW_SIZE, OK_TEXT, CANCEL_TEXT)


class FieldValidator(QValidator):
    """用 key_filter(field, char, current) 逐字符检查字段内容。

    QLineEdit 对键盘输入、粘贴和输入法提交的文本都会调用校验器,
    不通过的修改会被整体撤销。
    """

    def __init__(self, field, parent=None):
        super().__init__(parent)
        self.field = field
        self.key_filter = None

    def validate(self, text, pos):
        if self.key_filter is not None:
            for i, char in enumerate(text):
                if not self.key_filter(self.field, char, text[:i]):
                    return QValidator.Invalid, text, pos
        return QValidator.Acceptable, text, pos


class LoginView(QDialog):
    submit_requested = pyqtSignal()
    cancel_requested = pyqtSignal()
    value_changed = pyqtSignal(str, str)

    def __init__(self, parent=None):
        super().__init__(parent)

        self.setWindowTitle(WINDOW_TITLE)
        self.setFixedSize(*WINDOW_SIZE)

        self._inputs = {}
        self._validators = {}

        self.layout = QVBoxLayout(self)
        self.form_layout = QFormLayout()

        for field in FIELD_ORDER:
            rules = FORM_SCHEMA[field]
            line_edit = QLineEdit()
            line_edit.setMaxLength(rules["max_length"])
            if rules["echo_password"]:
                line_edit.setEchoMode(QLineEdit.Password) # 密码以 * 显示
            validator = FieldValidator(field, self)
            line_edit.setValidator(validator)
            line_edit.textChanged.connect(lambda text, f=field: self.value_changed.emit(f, text))
            self.form_layout.addRow(rules["label"], line_edit)
            self._inputs[field] = line_edit
            self._validators[field] = validator

        self.username_input = self._inputs["username"]
        self.password_input = self._inputs["password"]

        self.layout.addLayout(self.form_layout)

        self.button_box = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel, self)
        self.button_box.button(QDialogButtonBox.Ok).setText(OK_TEXT)
        self.button_box.button(QDialogButtonBox.Cancel).setText(CANCEL_TEXT)
        self.button_box.accepted.connect(self.submit_requested.emit)
        self.button_box.rejected.connect(self.cancel_requested.emit)

        self.layout.addWidget(self.button_box)

        self.username_input.setFocus()

    def set_key_filter(self, key_filter):
        """key_filter(field, char, current) -> bool, False 表示拒绝该字符。"""
        for validator in self._validators.values():
            validator.key_filter = key_filter

    def get_credentials(self):
        return self.username_input.text(), self.password_input.text()
