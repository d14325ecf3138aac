import sys
import logging

from PyQt5.QtWidgets import QApplication, QDialog

from src.controller.login_controller import LoginController # 登录对话框控制器

logger = logging.getLogger(__name__)


def main(argv=None):
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)

    login = LoginController()
    # exec_() 以模态方式运行对话框, 关闭前阻塞
    if login.exec_() == QDialog.Accepted:
        username, _password = login.get_credentials()
        logger.info("登录成功, 用户名: %s", username)
    else:
        logger.info("用户取消登录")
    return 0


if __name__ == "__main__":
    sys.exit(main())
