# form_schema.py

BACKSPACE = "\b"

WINDOW_TITLE = "登录"
WINDOW_SIZE = (300, 150)
OK_TEXT = "确定"
CANCEL_TEXT = "取消"

# --- 登录表单字段定义 ---
# 键 - 字段名, 值 - 该字段的规则和提示文本
FORM_SCHEMA = {
    "username": {
        "label": "用户名:",
        "max_length": 20,
        "min_length": 8,
        "allowed": r"[0-9A-Za-z]",
        "echo_password": False,
        "empty_message": "用户名不能为空！",
        "too_short_message": "用户名至少需要8位！",
    },
    "password": {
        "label": "密码:",
        "max_length": 20,
        "min_length": 8,
        "allowed": r"[0-9A-Za-z!@#$%^&*]",
        "echo_password": True,
        "empty_message": "密码不能为空！",
        "too_short_message": "密码至少需要8位！",
    },
}

# 字段顺序即校验顺序
FIELD_ORDER = ("username", "password")

# 小写字母、大写字母、数字、特殊符号各至少一个, 总长 8-20
PASSWORD_COMPLEXITY = r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[!@#$%^&*]).{8,20}"
PASSWORD_COMPLEXITY_MESSAGE = "密码需要包含大小写字母、数字和特殊符号！"
