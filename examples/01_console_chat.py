"""01 — Console chat.

Same as ``tenki-chat``: reads settings from the environment (or ``.env``)
and answers weather questions for the supported Japanese places.
"""

from tenki_chat import Settings
from tenki_chat.cli import build_session, run_repl

run_repl(build_session(Settings.from_env()))
