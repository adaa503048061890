"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def sample_cedict_content():
    """Sample CC-CEDICT dictionary content."""
    return """# CC-CEDICT
# Community maintained free Chinese-English dictionary.
中文 中文 [Zhong1 wen2] /Chinese language/
學習 学习 [xue2 xi2] /to learn/to study/
學 学 [xue2] /to learn/to study/science/
我們 我们 [wo3 men5] /we/us/
我 我 [wo3] /I/me/my/
行 行 [xing2] /to walk/to go/
行 行 [hang2] /row/line/profession/
this line is malformed
語 语 [yu3] /dialect/language/speech/
語學 语学 [yu3 xue2] /linguistics/
"""


@pytest.fixture
def sample_jedict_content():
    """Sample JEDICT dictionary content."""
    return """# JEDICT
語 \\ゴ\\ [かた] /language/word/
鮎 \\デン ネン\\ [あゆ なまず] /freshwater trout/smelt/
学 \\ガク\\ [まな] /study/learning/
"""


@pytest.fixture
def sample_tiers():
    """Sample tier table data (HSK-style levels)."""
    return {
        "1": ["我們", "我", "中文", "學習"],
        "2": ["語學", "學"],
        "3": ["語"],
    }


@pytest.fixture
def cedict_file(tmp_path, sample_cedict_content):
    """CEDICT content written to a file."""
    path = tmp_path / "cedict_ts.u8"
    path.write_text(sample_cedict_content, encoding="utf-8")
    return path


@pytest.fixture
def tier_file(tmp_path, sample_tiers):
    """Tier table written to a JSON file."""
    path = tmp_path / "hsk-vocab.json"
    path.write_text(json.dumps(sample_tiers, ensure_ascii=False), encoding="utf-8")
    return path
