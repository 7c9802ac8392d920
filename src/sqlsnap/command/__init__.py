"""Redis command-line parsing and reply normalization."""

from sqlsnap.command.reply import ReplyShape, classify_reply, normalize_reply
from sqlsnap.command.tokenizer import split_command

__all__ = ["ReplyShape", "classify_reply", "normalize_reply", "split_command"]
