# app.py
from flask import Flask, request, jsonify
from sqlalchemy.exc import SQLAlchemyError
from config import Config
from models import db, Word
from services import init_db, pick_random_word, generate_options, check_answer
import logging
import os

# 判断是否在测试环境中（由 tests/conftest.py 设置）
TESTING = os.getenv('TESTING') == 'true'

app = Flask(__name__)
app.logger.setLevel(logging.INFO)
app.config.from_object(Config)

if TESTING:
    # 测试环境：使用内存 SQLite
    app.config.update({
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'TESTING': True,
    })

db.init_app(app)


def json_body():
    """读取 JSON 请求体，非对象（数组、字符串、数字）或解析失败都按空对象处理"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return data


def storage_error(e):
    """把数据库异常转换成 500 响应，优先返回驱动层的原始错误信息"""
    db.session.rollback()
    message = str(getattr(e, 'orig', None) or e)
    app.logger.error(f"Storage error: {message}")
    return jsonify({'error': message}), 500


# --- API 接口 ---

@app.route('/words', methods=['GET'])
def get_words():
    try:
        words = Word.query.all()
    except SQLAlchemyError as e:
        return storage_error(e)
    return jsonify([w.to_dict() for w in words])


@app.route('/quiz', methods=['GET'])
def get_quiz():
    try:
        word = pick_random_word()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Failed to pick quiz word: {e}")
        word = None

    if word is None:
        return jsonify({'error': 'No words available'}), 500

    return jsonify({
        'question': f'What is the translation of "{word.word}"?',
        'options': generate_options(word.translation),
        'answer': word.translation
    })


@app.route('/answer', methods=['POST'])
def submit_answer():
    data = json_body()
    return jsonify(check_answer(data.get('selected'), data.get('correct')))


@app.route('/add-word', methods=['POST'])
def add_word():
    data = json_body()
    eng = data.get('word')
    translation = data.get('translation')
    if not eng or not translation:
        return jsonify({'error': 'Word and translation are required.'}), 400

    try:
        new_word = Word()
        new_word.word = eng
        new_word.translation = translation
        db.session.add(new_word)
        db.session.commit()
    except SQLAlchemyError as e:
        return storage_error(e)

    return jsonify({
        'message': 'Word added!',
        'id': new_word.id,
        'word': eng,
        'translation': translation
    })


@app.cli.command('init-db')
def init_db_command():
    """建表并写入默认单词"""
    init_db()


# 启动时初始化数据库（测试环境由 fixture 负责）
if not TESTING:
    with app.app_context():
        init_db()


if __name__ == '__main__':
    app.logger.info(f"Server running at http://localhost:{Config.PORT}")
    app.run(host=Config.HOST, port=Config.PORT)
