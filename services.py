# services.py
import random

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from models import db, Word, DEFAULT_WORDS

# 每道题最多的干扰项数量
MAX_DISTRACTORS = 3


def init_db():
    """建表并在空表时写入默认单词，建表失败只记录日志不退出"""
    try:
        db.create_all()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Failed to create table: {e}")
        return False

    seed_default_words()
    return True


def seed_default_words():
    """表为空时写入默认词库，返回写入的条数"""
    if Word.query.count() > 0:
        return 0

    for eng, translation in DEFAULT_WORDS:
        word = Word()
        word.word = eng
        word.translation = translation
        db.session.add(word)
    db.session.commit()

    current_app.logger.info(f"Seeded {len(DEFAULT_WORDS)} default words")
    return len(DEFAULT_WORDS)


def pick_random_word():
    """随机取一个单词，表为空时返回 None"""
    return Word.query.order_by(db.func.random()).first()


def generate_options(correct_translation):
    """
    生成选择题选项：正确答案 + 最多 3 个随机干扰项，去重后打乱。
    查询失败时返回空列表。
    """
    try:
        rows = (
            db.session.query(Word.translation)
            .filter(Word.translation != correct_translation)
            .order_by(db.func.random())
            .limit(MAX_DISTRACTORS)
            .all()
        )
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.warning(f"Failed to load distractors: {e}")
        return []

    # dict.fromkeys 按首次出现去重，正确答案只出现一次
    options = list(dict.fromkeys([correct_translation] + [r.translation for r in rows]))
    random.shuffle(options)
    return options


def check_answer(selected, correct):
    """比较用户选择与正确答案（区分大小写的完全匹配）"""
    if selected == correct:
        return {'correct': True, 'message': 'Correct!'}
    return {'correct': False, 'message': f'Incorrect. The correct answer was "{correct}".'}
