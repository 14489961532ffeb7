"""Traditional to Simplified Chinese conversion for sutra text.

The table covers the characters found in the sutra sources this project
imports. It is not a general-purpose converter; characters without an entry
are passed through unchanged.
"""

import copy
from types import MappingProxyType

_T2S = {
    "來": "来", "億": "亿", "別": "别", "勝": "胜", "勢": "势", "厭": "厌", "問": "问", "啟": "启",
    "嚧": "噜", "嚴": "严", "國": "国", "圍": "围", "報": "报", "塵": "尘", "墮": "堕", "壞": "坏",
    "實": "实", "寶": "宝", "屬": "属", "島": "岛", "廣": "广", "彌": "弥", "後": "后", "從": "从",
    "復": "复", "恆": "恒", "惛": "昏", "惡": "恶", "愍": "悯", "愛": "爱", "慚": "惭", "憐": "怜",
    "應": "应", "懷": "怀", "捨": "舍", "擁": "拥", "擔": "担", "攝": "摄", "數": "数", "於": "于",
    "時": "时", "書": "书", "會": "会", "業": "业", "極": "极", "樂": "乐", "樓": "楼", "橫": "横",
    "歡": "欢", "殺": "杀", "毘": "毗", "決": "决", "淨": "净", "減": "减", "滅": "灭", "滿": "满",
    "漢": "汉", "濁": "浊", "濟": "济", "為": "为", "無": "无", "爾": "尔", "猶": "犹", "獄": "狱",
    "獲": "获", "現": "现", "畢": "毕", "異": "异", "當": "当", "癡": "痴", "發": "发", "盜": "盗",
    "盡": "尽", "眾": "众", "瞋": "嗔", "礙": "碍", "種": "种", "稱": "称", "積": "积", "紹": "绍",
    "終": "终", "經": "经", "緣": "缘", "繞": "绕", "羅": "罗", "義": "义", "聞": "闻", "聲": "声",
    "聽": "听", "脫": "脱", "臨": "临", "與": "与", "莊": "庄", "華": "华", "萬": "万", "葉": "叶",
    "著": "着", "蓋": "盖", "蓮": "莲", "薩": "萨", "藥": "药", "處": "处", "衆": "众", "衛": "卫",
    "見": "见", "親": "亲", "覺": "觉", "觀": "观", "記": "记", "設": "设", "許": "许", "訶": "诃",
    "詞": "词", "語": "语", "誦": "诵", "誨": "诲", "說": "说", "調": "调", "請": "请", "諦": "谛",
    "諸": "诸", "謂": "谓", "證": "证", "譯": "译", "護": "护", "讀": "读", "變": "变", "豐": "丰",
    "財": "财", "貪": "贪", "賢": "贤", "輞": "辋", "辯": "辩", "連": "连", "遊": "游", "過": "过",
    "達": "达", "邊": "边", "釋": "释", "鉢": "钵", "門": "门", "間": "间", "閻": "阎", "闍": "阇",
    "際": "际", "隨": "随", "雖": "虽", "離": "离", "難": "难", "電": "电", "頂": "顶", "順": "顺",
    "頭": "头", "願": "愿", "饒": "饶", "鹹": "咸", "龍": "龙",
}

T2S_MAP = MappingProxyType(_T2S)


def to_simplified(text: str) -> str:
    """Convert Traditional characters in text to Simplified.

    Args:
        text: Input text

    Returns:
        Text with every mapped character replaced
    """
    if not text:
        return text
    return "".join(T2S_MAP.get(ch, ch) for ch in text)


def _convert_lines(lines):
    return [to_simplified(line) for line in lines]


def convert_document(document: dict) -> dict:
    """Convert every displayed text field of a sutra document.

    The document ``id`` is left alone. The input is not modified.

    Args:
        document: Parsed sutra document

    Returns:
        A converted copy
    """
    converted = copy.deepcopy(document)

    for key in ("title", "translator"):
        if isinstance(converted.get(key), str):
            converted[key] = to_simplified(converted[key])
    for key in ("openingVerse", "dedication"):
        if converted.get(key):
            converted[key] = _convert_lines(converted[key])

    for chapter in converted.get("chapters", []):
        chapter["title"] = to_simplified(chapter["title"])
        paragraphs = []
        for paragraph in chapter["paragraphs"]:
            if isinstance(paragraph, str):
                paragraphs.append(to_simplified(paragraph))
                continue
            for key in ("title", "text"):
                if isinstance(paragraph.get(key), str):
                    paragraph[key] = to_simplified(paragraph[key])
            paragraphs.append(paragraph)
        chapter["paragraphs"] = paragraphs

    return converted
