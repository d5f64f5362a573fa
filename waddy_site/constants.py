"""All fixed paths, labels and video-script settings."""

DIALOGUE_DIR = "dialogue"
DIARY_DIR = "diary"
HINA_DIARY_DIR = "diary-hina"
GALGE_DIR = "galge"
VIDEO_SCRIPT_DIR = "video-scripts"

DIALOGUE_PAGE = "dialogue.html"
DIARY_PAGE = "diary.html"
HINA_DIARY_PAGE = "diary-hina.html"
GALGE_PAGE = "galge-guide.html"

FRONTMATTER_DELIMITER = "---"
VOICE_SETTINGS_FILE = "voice.json"          # optional sidecar in dialogue/
MARKDOWN_EXTENSIONS = ["tables", "fenced_code"]

# Speaker channels in the exported script
DEFAULT_CHANNEL = "left"
CHILD_CHANNEL = "right"
CHILD_SPEAKER_PREFIX = "ひな"
WADDY_SPEAKER = "ワディー"
HINA_SPEAKER = "ひな"

# Video-script schema defaults
SCRIPT_VERSION = "1"
VIDEO_WIDTH = 1920
VIDEO_HEIGHT = 1080
VIDEO_FPS = 30
VIDEO_BACKGROUND = "#10131b"
AVATAR_VRM = "assets/avatar/hinahina20241110_BIG.vrm"
AVATAR_IDLE_MOTION = "y_pose"
VOICE_TIMEOUT_SEC = 20
CHANNEL_VOICES = {
    DEFAULT_CHANNEL: {"narrator": "Japanese Male", "speed": 100, "pitch": -2},
    CHILD_CHANNEL: {"narrator": "Japanese Female Child", "speed": 106, "pitch": 20},
}

PAUSE_TITLE_SEC = 0.25              # episode title in the intro scene
PAUSE_HEADING_SEC = 0.2             # subtitle, date and section titles
PAUSE_LINE_SEC = 0.15               # every body line

UNTITLED = "無題"
FALLBACK_SLUG = "episode"
QUOTE_LABEL = "引用"
IMAGE_LABEL = "画像メモ"
IMAGE_INLINE_LABEL = "画像"
TABLE_LABEL = "表"
TABLE_FIRST_COLUMN = "項目"
RECORDED_LABEL = "収録"
RECORDED_ON_LABEL = "収録日"
WEEKDAYS = ["月", "火", "水", "木", "金", "土", "日"]   # date.weekday() order

# Review front-matter keys with their labels, in display order
GALGE_META_LABELS = [
    ("brand", "ブランド"),
    ("release", "発売日"),
    ("genre", "ジャンル"),
    ("scenario", "シナリオ"),
    ("play_period", "プレイ時期"),
]

VERSION = "0.1.0"
