"""Script Diff - which words of a memorized script a learner reproduced.

Usage:
    from script_diff import diff_script

    words = diff_script("I am a student.", "i am student")
    # [DiffWord(word='I', matched=True), DiffWord(word='am', matched=True),
    #  DiffWord(word='a', matched=False), DiffWord(word='student.', matched=True)]
"""

from script_diff.core import DiffWord, Token
from script_diff.diff import diff_script
from script_diff.config import ScriptDiffConfig, load_config

__version__ = "0.1.0"

__all__ = [
    "diff_script",
    "DiffWord",
    "Token",
    "ScriptDiffConfig",
    "load_config",
]
