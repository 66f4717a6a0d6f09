"""
tests/conftest.py
测试公共配置：内存数据库 + Flask 测试客户端
"""
import pytest
import os

# ========== 关键：在导入app之前设置环境变量 ==========
os.environ['DB_URL'] = 'sqlite:///:memory:'
os.environ['TESTING'] = 'true'

# ========== 导入app ==========
from app import app, db, Word


@pytest.fixture(scope='session', autouse=True)
def setup_test_environment():
    """
    设置测试环境 - 只在会话开始时执行一次
    """
    with app.app_context():
        db.create_all()

    yield

    with app.app_context():
        db.drop_all()


@pytest.fixture
def test_client():
    """
    测试客户端fixture - 每个测试函数一个干净的客户端
    """
    with app.test_client() as client:
        # 每个测试开始时清空单词表
        with app.app_context():
            db.create_all()
            db.session.query(Word).delete()
            db.session.commit()

        yield client

        # 测试后清理
        with app.app_context():
            db.session.query(Word).delete()
            db.session.commit()
            db.session.remove()


@pytest.fixture
def db_session():
    """
    数据库会话fixture
    """
    with app.app_context():
        yield db.session


@pytest.fixture
def sample_words(test_client):
    """
    预置测试单词数据，返回 (word, translation) 列表
    """
    words_data = [
        ('Cat', 'Gato'),
        ('Dog', 'Perro'),
        ('House', 'Casa'),
        ('Water', 'Agua'),
        ('Bread', 'Pan'),
    ]
    with app.app_context():
        for eng, translation in words_data:
            db.session.add(Word(word=eng, translation=translation))
        db.session.commit()

    return words_data
