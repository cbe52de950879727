"""
Theme definitions for the harakat picker GUI.
"""
from harakat_toolkit.output.renderer import ANSWER_STYLESHEET


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#0364B8"
    PRIMARY_BLUE_HOVER = "#0A2767"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    HOVER = "#f0f0f0"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders
    BORDER = "#e0e0e0"

    # Status
    ERROR = "#d32f2f"
    SUCCESS = "#388e3c"


class Fonts:
    # Font Families
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"
    ARABIC_FONT = "'Amiri', 'Noto Naskh Arabic', 'Traditional Arabic', 'Times New Roman', serif"

    # Sizes
    BODY = "14pt"
    LETTER = "32pt"
    OPTION = "24pt"


# Letter labels carry a "status" dynamic property matching UnitStatus values
PICKER_STYLESHEET = f"""
    QLabel[status] {{
        font-family: {Fonts.ARABIC_FONT};
        font-size: {Fonts.LETTER};
        color: {Colors.TEXT_PRIMARY};
        padding: 0px;
    }}
    QLabel[status="pickable"], QLabel[status="pickable-confirmed"] {{
        color: {Colors.PRIMARY_BLUE};
    }}
    QLabel[status="pickable"]:hover, QLabel[status="pickable-confirmed"]:hover {{
        background-color: {Colors.HOVER};
    }}
    QFrame#harakatOptions {{
        background-color: {Colors.SURFACE};
        border: 1px solid {Colors.BORDER};
        border-radius: 6px;
    }}
    QPushButton#optionLetter {{
        font-family: {Fonts.ARABIC_FONT};
        font-size: {Fonts.OPTION};
        color: {Colors.TEXT_PRIMARY};
        background: transparent;
        border: none;
        padding: 2px 8px;
    }}
    QPushButton#optionLetter:hover {{
        background-color: {Colors.HOVER};
        color: {Colors.PRIMARY_BLUE};
    }}
"""

BUTTON_PRIMARY = f"""
    QPushButton {{
        background-color: {Colors.PRIMARY_BLUE};
        color: {Colors.TEXT_ON_PRIMARY};
        border-radius: 6px;
        padding: 8px 16px;
        border: none;
    }}
    QPushButton:hover {{
        background-color: {Colors.PRIMARY_BLUE_HOVER};
    }}
"""

# Graded answer display (QTextBrowser default stylesheet)
RESULT_STYLESHEET = ANSWER_STYLESHEET + f"""
.validationerror {{ color: {Colors.ERROR}; }}
.qtext {{ color: {Colors.TEXT_SECONDARY}; }}
"""


def apply_theme(app) -> None:
    """
    Apply the picker stylesheet and default font to the QApplication.
    """
    from PySide6.QtGui import QFont

    font = QFont()
    font.setFamily(Fonts.UI_FONT.split(",")[0].strip(" '\""))
    try:
        font.setPointSize(int(Fonts.BODY.replace("pt", "")))
    except ValueError:
        pass
    app.setFont(font)

    app.setStyleSheet(PICKER_STYLESHEET)
