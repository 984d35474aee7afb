# UI 样式常量，供 desktop_app.py 和 app/ 下的对话框使用
DIALOG_STYLE = """
QDialog { background-color: #f6f8fa; }
"""

BTN_PRIMARY_STYLE = """
QPushButton {
    background-color: #2da44e;
    color: white;
    border: none;
    border-radius: 4px;
    padding: 8px 16px;
    font-weight: bold;
}
QPushButton:hover { background-color: #2c974b; }
QPushButton:pressed { background-color: #298e46; }
QPushButton:disabled { background-color: #94d3a2; }
"""

BTN_SECONDARY_STYLE = """
QPushButton {
    background-color: #f6f8fa;
    color: #24292f;
    border: 1px solid #d0d7de;
    border-radius: 4px;
    padding: 6px 12px;
}
QPushButton:hover { background-color: #eaeef2; }
QPushButton:pressed { background-color: #d0d7de; }
"""

BTN_DANGER_STYLE = """
QPushButton {
    background-color: #f6f8fa;
    color: #cf222e;
    border: 1px solid #d0d7de;
    border-radius: 4px;
    padding: 6px 12px;
}
QPushButton:hover { background-color: #a40e26; color: white; }
"""

INPUT_STYLE = """
QLineEdit, QSpinBox {
    border: 1px solid #d0d7de;
    border-radius: 4px;
    padding: 6px;
    background-color: white;
    color: #24292f;
}
QLineEdit:focus, QSpinBox:focus { border: 2px solid #0969da; }
"""

TABLE_HEADER_STYLE = """
QHeaderView::section {
    background-color: #24292f;
    color: white;
    font-weight: bold;
    padding: 6px;
    border: 1px solid #24292f;
}
"""

TABLE_STYLE = """
QTableWidget {
    gridline-color: #e0e0e0;
    background-color: #f6f8fa;
}
QTableWidget::item { padding: 6px; background-color: white; color: #24292f; }
QTableWidget::item:selected { background-color: #0969da; color: white; }
"""

STAT_CARD_STYLE = """
QLabel {
    background-color: white;
    border: 1px solid #d0d7de;
    border-radius: 6px;
    padding: 10px;
    font-size: 13px;
    color: #24292f;
}
"""

LOG_STYLE = """
QPlainTextEdit {
    background-color: #0d1117;
    color: #c9d1d9;
    font-family: Consolas, "Courier New", monospace;
    font-size: 11px;
    border-radius: 4px;
}
"""
