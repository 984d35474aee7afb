# -*- coding: utf-8 -*-
"""
GitHub 设置对话框
"""
from PySide6 import QtCore, QtWidgets

from core import GitHubConfig
import ui_styles


class SettingsDialog(QtWidgets.QDialog):
    def __init__(self, config: GitHubConfig, parent=None):
        super().__init__(parent)
        self.setWindowTitle("⚙️ 设置")
        self.setModal(True)
        self.resize(560, 420)
        self.setStyleSheet(ui_styles.DIALOG_STYLE + ui_styles.INPUT_STYLE)

        self.config = config

        main_layout = QtWidgets.QVBoxLayout(self)
        main_layout.setContentsMargins(20, 20, 20, 20)
        main_layout.setSpacing(12)

        main_layout.addWidget(self._create_section_header("🔑 访问令牌"))
        self.input_token = QtWidgets.QLineEdit(config.token)
        self.input_token.setEchoMode(QtWidgets.QLineEdit.Password)
        self.input_token.setPlaceholderText("ghp_...")
        main_layout.addWidget(self._create_form_row("Token:", self.input_token))

        main_layout.addWidget(self._create_section_header("📦 仓库"))
        self.input_owner = QtWidgets.QLineEdit(config.owner)
        self.input_repo = QtWidgets.QLineEdit(config.repo)
        self.input_branch = QtWidgets.QLineEdit(config.branch)
        self.input_file_path = QtWidgets.QLineEdit(config.file_path)
        main_layout.addWidget(self._create_form_row("Owner:", self.input_owner))
        main_layout.addWidget(self._create_form_row("仓库:", self.input_repo))
        main_layout.addWidget(self._create_form_row("分支:", self.input_branch))
        main_layout.addWidget(self._create_form_row("文件路径:", self.input_file_path))

        main_layout.addWidget(self._create_section_header("📝 提交"))
        self.input_message = QtWidgets.QLineEdit(config.default_commit_message)
        main_layout.addWidget(self._create_form_row("默认提交信息:", self.input_message))

        self.input_api_url = QtWidgets.QLineEdit(config.api_base_url)
        main_layout.addWidget(self._create_form_row("API 地址:", self.input_api_url))

        self.spin_timeout = QtWidgets.QSpinBox()
        self.spin_timeout.setRange(5, 300)
        self.spin_timeout.setValue(config.timeout)
        self.spin_timeout.setSuffix(" 秒")
        main_layout.addWidget(self._create_form_row("请求超时:", self.spin_timeout))

        main_layout.addStretch()

        # ========== 底部按钮 ==========
        btn_layout = QtWidgets.QHBoxLayout()
        btn_layout.setSpacing(10)

        btn_reset = QtWidgets.QPushButton("🔄 重置默认")
        btn_reset.setStyleSheet(ui_styles.BTN_SECONDARY_STYLE)
        btn_reset.setCursor(QtCore.Qt.PointingHandCursor)
        btn_reset.clicked.connect(self.on_reset_defaults)

        btn_ok = QtWidgets.QPushButton("✓ 保存")
        btn_ok.setMinimumWidth(100)
        btn_ok.setStyleSheet(ui_styles.BTN_PRIMARY_STYLE)
        btn_ok.setCursor(QtCore.Qt.PointingHandCursor)
        btn_ok.clicked.connect(self.accept)

        btn_cancel = QtWidgets.QPushButton("✕ 取消")
        btn_cancel.setMinimumWidth(100)
        btn_cancel.setStyleSheet(ui_styles.BTN_SECONDARY_STYLE)
        btn_cancel.setCursor(QtCore.Qt.PointingHandCursor)
        btn_cancel.clicked.connect(self.reject)

        btn_layout.addWidget(btn_reset)
        btn_layout.addStretch()
        btn_layout.addWidget(btn_ok)
        btn_layout.addWidget(btn_cancel)
        main_layout.addLayout(btn_layout)

    def _create_section_header(self, title: str) -> QtWidgets.QWidget:
        """创建段落标题"""
        header = QtWidgets.QWidget()
        layout = QtWidgets.QHBoxLayout(header)
        layout.setContentsMargins(0, 10, 0, 5)

        lbl = QtWidgets.QLabel(title)
        lbl.setStyleSheet("font-weight: bold; color: #24292f; font-size: 13px;")

        line = QtWidgets.QFrame()
        line.setFrameShape(QtWidgets.QFrame.HLine)
        line.setFrameShadow(QtWidgets.QFrame.Sunken)

        layout.addWidget(lbl, 0)
        layout.addWidget(line, 1)
        return header

    def _create_form_row(self, label: str, widget) -> QtWidgets.QWidget:
        """创建表单行"""
        row = QtWidgets.QWidget()
        layout = QtWidgets.QHBoxLayout(row)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(10)

        lbl = QtWidgets.QLabel(label)
        lbl.setMinimumWidth(110)
        lbl.setStyleSheet("color: #57606a;")

        layout.addWidget(lbl, 0)
        layout.addWidget(widget, 1)
        return row

    def on_reset_defaults(self):
        """重置为默认配置（保留令牌）"""
        default = GitHubConfig()
        self.input_branch.setText(default.branch)
        self.input_file_path.setText(default.file_path)
        self.input_message.setText(default.default_commit_message)
        self.input_api_url.setText(default.api_base_url)
        self.spin_timeout.setValue(default.timeout)

    def get_config(self) -> GitHubConfig:
        """根据输入生成新配置"""
        return self.config.update(
            token=self.input_token.text(),
            owner=self.input_owner.text(),
            repo=self.input_repo.text(),
            branch=self.input_branch.text() or "main",
            file_path=self.input_file_path.text() or "log.txt",
            default_commit_message=self.input_message.text() or GitHubConfig().default_commit_message,
            api_base_url=self.input_api_url.text() or GitHubConfig().api_base_url,
            timeout=self.spin_timeout.value(),
        )
