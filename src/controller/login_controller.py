# File: src/controller/login_controller.py
import logging

from PyQt5.QtWidgets import QMessageBox

from src.model.login_model import LoginModel, Accepted
from src.view.login_view import LoginView

logger = logging.getLogger(__name__)


class LoginController:
    def __init__(self, parent=None):
        self.model = LoginModel()
        self.view = LoginView(parent)
        self.result = None

        self.view.set_key_filter(self.filter_keystroke)
        self.view.value_changed.connect(self.model.set_value)
        self.view.submit_requested.connect(self.submit)
        self.view.cancel_requested.connect(self.cancel)
        self.model.validation_failed.connect(self.show_validation_message)

    def exec_(self):
        """模态显示对话框, 返回 QDialog.Accepted 或 QDialog.Rejected。"""
        return self.view.exec_()

    def get_credentials(self):
        """返回 (用户名, 密码); 仅在确定且校验通过后有效。"""
        if not isinstance(self.result, Accepted):
            return None
        return self.result.credentials()

    def filter_keystroke(self, field, char, current):
        return self.model.on_keystroke(field, char, current)

    def show_validation_message(self, message):
        QMessageBox.information(self.view, "", message)

    def submit(self):
        result = self.model.on_submit()
        if result.accepted:
            logger.info("登录信息校验通过, 用户名: %s", result.username)
            self.result = result
            self.view.accept()
        else:
            logger.info("登录信息校验未通过: %s", result.message)

    def cancel(self):
        self.result = self.model.on_cancel()
        logger.info("用户取消登录")
        self.view.reject()
