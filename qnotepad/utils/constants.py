APP_ORG = "QuickTools"
APP_NAME = "QNotepad"
APP_CONFIG_DIR = "QNotepad"
CONFIG_FILE_NAME = "config.ini"
DIST_NAME = "qnotepad"

WARNING_TITLE = "Warning"
OPEN_CAPTION = "Open the file"
SAVE_AS_CAPTION = "Save as"

MSG_CANNOT_OPEN = "Cannot open file : {reason}"
MSG_CANNOT_SAVE = "Cannot save file : {reason}"
MSG_CANNOT_PRINT = "Cannot access printer."

DEFAULT_FILE_FILTER = "Text files (*.txt);;All files (*)"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
