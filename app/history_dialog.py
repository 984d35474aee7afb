# -*- coding: utf-8 -*-
"""
提交历史界面
"""
from PySide6 import QtCore, QtWidgets, QtGui

from core import ActivityStore, Statistics, format_size
import ui_styles


class HistoryDialog(QtWidgets.QDialog):
    """提交历史与统计对话框"""

    # 用户确认清空后发出，由主窗口交给服务层执行
    clear_requested = QtCore.Signal()

    def __init__(self, store: ActivityStore, parent=None):
        super().__init__(parent)
        self.store = store

        self.setWindowTitle("🕒 提交历史")
        self.setMinimumSize(820, 560)
        self.setStyleSheet(ui_styles.DIALOG_STYLE)

        self.setup_ui()
        self.load_history()

    def setup_ui(self):
        """构建界面"""
        layout = QtWidgets.QVBoxLayout(self)
        layout.setSpacing(15)
        layout.setContentsMargins(20, 20, 20, 20)

        title = QtWidgets.QLabel("🕒 提交历史")
        title.setStyleSheet("font-size: 18px; font-weight: bold; color: #24292f;")
        layout.addWidget(title)

        # 统计信息栏
        self.stats_label = QtWidgets.QLabel()
        self.stats_label.setStyleSheet(ui_styles.STAT_CARD_STYLE)
        layout.addWidget(self.stats_label)

        # 工具栏
        toolbar = QtWidgets.QHBoxLayout()

        self.filter_input = QtWidgets.QLineEdit()
        self.filter_input.setPlaceholderText("按提交信息过滤...")
        self.filter_input.setStyleSheet(ui_styles.INPUT_STYLE)
        self.filter_input.textChanged.connect(self.load_history)
        toolbar.addWidget(self.filter_input)

        self.failed_only_chk = QtWidgets.QCheckBox("只看失败")
        self.failed_only_chk.toggled.connect(self.load_history)
        toolbar.addWidget(self.failed_only_chk)

        toolbar.addStretch()

        clear_btn = QtWidgets.QPushButton("🗑 清空历史")
        clear_btn.setStyleSheet(ui_styles.BTN_DANGER_STYLE)
        clear_btn.setFixedHeight(32)
        clear_btn.setCursor(QtCore.Qt.PointingHandCursor)
        clear_btn.clicked.connect(self.on_clear_history)
        toolbar.addWidget(clear_btn)

        layout.addLayout(toolbar)

        # 历史列表
        self.history_table = QtWidgets.QTableWidget()
        self.history_table.setColumnCount(5)
        self.history_table.setHorizontalHeaderLabels([
            "时间", "提交信息", "大小", "结果", "说明"
        ])
        self.history_table.setColumnWidth(0, 150)
        self.history_table.setColumnWidth(1, 280)
        self.history_table.setColumnWidth(2, 80)
        self.history_table.setColumnWidth(3, 60)
        self.history_table.horizontalHeader().setStretchLastSection(True)
        self.history_table.horizontalHeader().setStyleSheet(ui_styles.TABLE_HEADER_STYLE)
        self.history_table.setStyleSheet(ui_styles.TABLE_STYLE)
        self.history_table.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectRows)
        self.history_table.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.history_table.setAlternatingRowColors(True)
        self.history_table.verticalHeader().setVisible(False)
        layout.addWidget(self.history_table)

        # 底部按钮
        btn_layout = QtWidgets.QHBoxLayout()
        btn_layout.addStretch()

        close_btn = QtWidgets.QPushButton("关闭")
        close_btn.setFixedWidth(100)
        close_btn.setStyleSheet(ui_styles.BTN_SECONDARY_STYLE)
        close_btn.clicked.connect(self.accept)
        btn_layout.addWidget(close_btn)

        layout.addLayout(btn_layout)

    def load_history(self):
        """加载历史记录"""
        keyword = self.filter_input.text().strip().lower()
        failed_only = self.failed_only_chk.isChecked()

        self.history_table.setRowCount(0)
        for entry in self.store.entries:
            if keyword and keyword not in entry.message.lower():
                continue
            if failed_only and entry.success:
                continue

            row = self.history_table.rowCount()
            self.history_table.insertRow(row)

            self.history_table.setItem(row, 0, QtWidgets.QTableWidgetItem(entry.display_time()))

            msg_item = QtWidgets.QTableWidgetItem(entry.message)
            msg_item.setToolTip(entry.message)
            self.history_table.setItem(row, 1, msg_item)

            size_item = QtWidgets.QTableWidgetItem(format_size(entry.file_size_bytes))
            size_item.setTextAlignment(QtCore.Qt.AlignCenter)
            self.history_table.setItem(row, 2, size_item)

            result_item = QtWidgets.QTableWidgetItem("✓" if entry.success else "✗")
            result_item.setTextAlignment(QtCore.Qt.AlignCenter)
            result_item.setForeground(QtGui.QColor("#2da44e" if entry.success else "#cf222e"))
            self.history_table.setItem(row, 3, result_item)

            note = entry.commit_sha[:7] if entry.commit_sha else (entry.error or "")
            self.history_table.setItem(row, 4, QtWidgets.QTableWidgetItem(note))

        self.update_stats(self.store.stats)

    def update_stats(self, stats: Statistics):
        self.stats_label.setText(
            f"📊 共 {stats.total_commits} 次提交 | "
            f"成功 {stats.successful_commits} | 失败 {stats.failed_commits} | "
            f"成功率 {stats.success_rate:.1f}% | "
            f"🔥 当前连续 {stats.current_streak} 天 | 最长 {stats.longest_streak} 天 | "
            f"累计 {format_size(stats.total_file_size_bytes)}"
        )

    def on_clear_history(self):
        """清空历史"""
        reply = QtWidgets.QMessageBox.question(
            self, "确认清空",
            "确定要清空全部提交历史吗？此操作不可恢复。",
            QtWidgets.QMessageBox.Yes | QtWidgets.QMessageBox.No
        )
        if reply == QtWidgets.QMessageBox.Yes:
            self.clear_requested.emit()
            self.load_history()
