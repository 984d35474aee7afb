# -*- coding: utf-8 -*-
"""
桌面应用 - PySide6

功能：
- 输入提交信息，一键生成日志摘要并推送到 GitHub 仓库
- 显示提交统计（总数、成功/失败、连续天数）
- 右侧：实时日志（自动滚动）
- 推送在后台线程执行，使用信号回写 UI

运行：
    pip install -e .
    python desktop_app.py
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from PySide6 import QtCore, QtWidgets, QtGui

from core import ActivityStore, GitHubConfig, Statistics, format_size, load_config, save_config
from core.paths import get_data_dir
from app.commit_adapter import UICommitAdapter
from app.history_dialog import HistoryDialog
from app.settings_dialog import SettingsDialog
import ui_styles

logger = logging.getLogger(__name__)

APP_NAME = "DailyGitLog"


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, store: ActivityStore, config: GitHubConfig, adapter: Optional[UICommitAdapter] = None):
        super().__init__()
        self.setWindowTitle("Daily Git Log")
        self.resize(900, 560)

        self.store = store
        self.config = config
        self.adapter = adapter or UICommitAdapter(store)

        self.adapter.signals.commit_started.connect(self.on_commit_started)
        self.adapter.signals.commit_completed.connect(self.on_commit_completed)
        self.adapter.signals.commit_failed.connect(self.on_commit_failed)
        self.adapter.signals.stats_changed.connect(self.update_stats)

        self.create_menu()
        self.setup_ui()
        self._load_persistent_settings()

        self.update_stats(self.store.stats)
        self.update_repo_label()
        if not self.config.is_complete():
            self.append_log("⚠️ 尚未配置 GitHub 令牌或仓库，请先打开 设置")

    def setup_ui(self):
        central = QtWidgets.QWidget()
        self.setCentralWidget(central)
        layout = QtWidgets.QHBoxLayout(central)
        layout.setContentsMargins(15, 15, 15, 15)
        layout.setSpacing(15)

        # 左侧：提交表单 + 统计
        left = QtWidgets.QVBoxLayout()
        left.setSpacing(10)

        title = QtWidgets.QLabel("Daily Git Log")
        title.setStyleSheet("font-size: 22px; font-weight: bold; color: #24292f;")
        left.addWidget(title)

        self.lbl_repo = QtWidgets.QLabel()
        self.lbl_repo.setStyleSheet("color: #57606a;")
        left.addWidget(self.lbl_repo)

        self.input_message = QtWidgets.QLineEdit()
        self.input_message.setPlaceholderText("提交信息（留空使用默认信息）")
        self.input_message.setStyleSheet(ui_styles.INPUT_STYLE)
        self.input_message.returnPressed.connect(self.on_commit)
        left.addWidget(self.input_message)

        self.btn_commit = QtWidgets.QPushButton("🚀 推送到 GitHub")
        self.btn_commit.setStyleSheet(ui_styles.BTN_PRIMARY_STYLE)
        self.btn_commit.setFixedHeight(40)
        self.btn_commit.setCursor(QtCore.Qt.PointingHandCursor)
        self.btn_commit.clicked.connect(self.on_commit)
        left.addWidget(self.btn_commit)

        grid = QtWidgets.QGridLayout()
        grid.setSpacing(8)
        self.stat_labels = {}
        cards = [
            ("total", "总提交"), ("success", "成功"), ("failed", "失败"),
            ("current", "🔥 当前连续"), ("longest", "🏆 最长连续"), ("size", "累计大小"),
        ]
        for i, (key, caption) in enumerate(cards):
            lbl = QtWidgets.QLabel()
            lbl.setAlignment(QtCore.Qt.AlignCenter)
            lbl.setStyleSheet(ui_styles.STAT_CARD_STYLE)
            lbl.setProperty("caption", caption)
            self.stat_labels[key] = lbl
            grid.addWidget(lbl, i // 3, i % 3)
        left.addLayout(grid)
        left.addStretch()

        layout.addLayout(left, 1)

        # 右侧：日志
        right = QtWidgets.QVBoxLayout()
        right.addWidget(QtWidgets.QLabel("日志"))
        self.log_view = QtWidgets.QPlainTextEdit()
        self.log_view.setReadOnly(True)
        self.log_view.setStyleSheet(ui_styles.LOG_STYLE)
        right.addWidget(self.log_view)
        layout.addLayout(right, 1)

        self.status = self.statusBar()
        self.status.showMessage("就绪")

    def create_menu(self):
        """创建菜单栏"""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("文件")
        self.act_history = file_menu.addAction("🕒 提交历史")
        self.act_history.triggered.connect(self.open_history_dialog)
        act_folder = file_menu.addAction("📁 打开数据目录")
        act_folder.triggered.connect(self.on_open_folder)
        file_menu.addSeparator()
        act_exit = file_menu.addAction("退出")
        act_exit.triggered.connect(self.close)

        settings_menu = menubar.addMenu("设置")
        act_settings = settings_menu.addAction("⚙️ GitHub 设置")
        act_settings.triggered.connect(self.on_settings)
        act_clear_log = settings_menu.addAction("🧹 清空日志窗口")
        act_clear_log.triggered.connect(self.log_view_clear)

        help_menu = menubar.addMenu("帮助")
        act_about = help_menu.addAction("关于")
        act_about.triggered.connect(self.on_about)

    def _qsettings(self) -> "QtCore.QSettings":
        return QtCore.QSettings(APP_NAME, APP_NAME)

    def _load_persistent_settings(self):
        geometry = self._qsettings().value("geometry")
        if geometry is not None:
            self.restoreGeometry(geometry)

    def _save_persistent_settings(self):
        qs = self._qsettings()
        qs.setValue("geometry", self.saveGeometry())
        qs.sync()

    def closeEvent(self, event):
        self._save_persistent_settings()
        # 等待进行中的推送结束
        self.adapter.shutdown()
        return super().closeEvent(event)

    # ============ 日志 / 状态 ============

    def append_log(self, text: str):
        stamp = QtCore.QDateTime.currentDateTime().toString("HH:mm:ss")
        self.log_view.appendPlainText(f"[{stamp}] {text}")
        self.log_view.verticalScrollBar().setValue(self.log_view.verticalScrollBar().maximum())

    def log_view_clear(self):
        self.log_view.clear()

    def update_repo_label(self):
        if self.config.owner and self.config.repo:
            self.lbl_repo.setText(f"📦 {self.config.owner}/{self.config.repo} @ {self.config.branch} : {self.config.file_path}")
        else:
            self.lbl_repo.setText("📦 未配置仓库")

    def update_stats(self, stats: Statistics):
        values = {
            "total": str(stats.total_commits),
            "success": str(stats.successful_commits),
            "failed": str(stats.failed_commits),
            "current": f"{stats.current_streak} 天",
            "longest": f"{stats.longest_streak} 天",
            "size": format_size(stats.total_file_size_bytes),
        }
        for key, lbl in self.stat_labels.items():
            lbl.setText(f"{lbl.property('caption')}\n{values[key]}")

    def set_busy(self, busy: bool):
        self.btn_commit.setEnabled(not busy)
        self.input_message.setEnabled(not busy)
        # 推送过程中不允许打开历史（清空）
        self.act_history.setEnabled(not busy)
        self.btn_commit.setText("⏳ 推送中..." if busy else "🚀 推送到 GitHub")

    # ============ 操作 ============

    def on_commit(self):
        if self.adapter.is_busy():
            return
        if not self.config.has_token():
            QtWidgets.QMessageBox.warning(self, "缺少令牌", "请先在 设置 中填写 GitHub 访问令牌")
            self.on_settings()
            return

        self.set_busy(True)
        task_id = self.adapter.submit_commit(self.input_message.text(), self.config)
        if task_id is None:
            self.set_busy(False)
            self.append_log("⚠️ 已有推送在进行中")

    def on_commit_started(self, task_id: str, message: str):
        self.append_log(f"📤 {message}")
        self.status.showMessage("推送中...")

    def on_commit_completed(self, task_id: str, message: str):
        self.set_busy(False)
        self.input_message.clear()
        self.append_log(message)
        self.status.showMessage("推送成功", 5000)

    def on_commit_failed(self, task_id: str, error: str):
        self.set_busy(False)
        self.append_log(f"❌ 推送失败: {error}")
        self.status.showMessage("推送失败", 5000)

    def on_settings(self):
        dlg = SettingsDialog(self.config, self)
        if dlg.exec():
            self.config = dlg.get_config()
            if save_config(self.config):
                self.append_log(f"✅ 设置已保存: {self.config!r}")
            else:
                self.append_log("❌ 设置保存失败")
            self.update_repo_label()

    def open_history_dialog(self):
        dlg = HistoryDialog(self.store, self)
        dlg.clear_requested.connect(self.adapter.clear_history)
        dlg.exec()

    def on_open_folder(self):
        data_dir = get_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        QtGui.QDesktopServices.openUrl(QtCore.QUrl.fromLocalFile(str(data_dir)))

    def on_about(self):
        QtWidgets.QMessageBox.about(
            self, "关于",
            "Daily Git Log\n\n每天一次提交，记录并推送到 GitHub，统计连续提交天数。"
        )


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info(f"Data directory: {get_data_dir()}")
    store = ActivityStore()
    store.load()
    config = load_config()

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    win = MainWindow(store, config)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
