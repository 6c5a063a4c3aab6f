"""
Starter vocabulary for a fresh collection.

Uploads go through the duplicate check, so seeding twice is harmless.
"""

import time
from typing import Callable, Iterable, List, Optional

from eitangos.models.vocabulary import VocabularyPair
from eitangos.storage.base import SaveStatus, UpsertResult, VocabularyStorage


_SAMPLE_ROWS = [
    ("make a shift", "シフトの作成"),
    ("computer", "コンピューター"),
    ("cat", "猫"),
    ("school trip", "課外活動"),
    ("dog", "犬"),
    ("bird", "鳥"),
    ("fish", "魚"),
    ("apple", "リンゴ"),
    ("orange", "オレンジ"),
    ("book", "本"),
    ("pen", "ペン"),
    ("desk", "机"),
    ("chair", "椅子"),
    ("water", "水"),
    ("coffee", "コーヒー"),
    ("tea", "お茶"),
    ("morning", "朝"),
    ("afternoon", "午後"),
    ("evening", "夕方"),
    ("night", "夜"),
    ("today", "今日"),
    ("tomorrow", "明日"),
    ("yesterday", "昨日"),
    ("week", "週"),
    ("month", "月"),
    ("year", "年"),
    ("time", "時間"),
    ("work", "仕事"),
    ("study", "勉強"),
    ("friend", "友達"),
    ("family", "家族"),
    ("house", "家"),
    ("car", "車"),
    ("train", "電車"),
    ("station", "駅"),
    ("school", "学校"),
    ("office", "オフィス"),
    ("restaurant", "レストラン"),
    ("shop", "店"),
    ("park", "公園"),
    ("hospital", "病院"),
    ("bank", "銀行"),
    ("phone", "電話"),
    ("email", "メール"),
    ("meeting", "会議"),
    ("project", "プロジェクト"),
    ("task", "タスク"),
    ("deadline", "締め切り"),
    ("budget", "予算"),
    ("plan", "計画"),
]

SAMPLE_VOCABULARY: List[VocabularyPair] = [
    VocabularyPair(term=term, translation=translation)
    for term, translation in _SAMPLE_ROWS
]


def seed_storage(
    storage: VocabularyStorage,
    pairs: Iterable[VocabularyPair] = None,
    delay: float = 0.1,
    sleep: Optional[Callable[[float], None]] = None,
) -> UpsertResult:
    """
    Upload starter pairs, skipping terms already stored.
    
    Args:
        storage: Target store.
        pairs: Pairs to upload. Defaults to SAMPLE_VOCABULARY.
        delay: Pause between uploads in seconds.
        sleep: Sleep function. Defaults to time.sleep.
        
    Returns:
        UpsertResult with inserted/existing/failed counts.
    """
    if pairs is None:
        pairs = SAMPLE_VOCABULARY
    if sleep is None:
        sleep = time.sleep
    
    def pause_after_upload(pair: VocabularyPair, status: SaveStatus) -> None:
        if status is SaveStatus.INSERTED and delay > 0:
            sleep(delay)
    
    return storage.save_pairs(pairs, on_saved=pause_after_upload)
