"""출력 스타일 정의"""

from prompt_toolkit.styles import Style

# rich 스타일: 사용자에게 보여주는 비치명적 오류
ERROR_STYLE = "bold red"
WELCOME_STYLE = "bold cyan"

# prompt_toolkit 스타일 정의
prompt_style = Style.from_dict(
    {
        "prompt": "bold green",
        "completion-menu.completion": "bg:#333333 #ffffff",
        "completion-menu.completion.current": "bg:#00aa00 #000000",
        "completion-menu.meta.completion": "bg:#333333 #888888",
        "completion-menu.meta.completion.current": "bg:#00aa00 #000000",
    }
)
