# models.py
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# 首次启动时写入的默认词库
DEFAULT_WORDS = [
    ('Hello', 'Hola'),
    ('Goodbye', 'Adiós'),
    ('Please', 'Por favor'),
    ('Thank you', 'Gracias'),
    ('Yes', 'Sí'),
    ('No', 'No'),
]

class Word(db.Model):
    __tablename__ = 'words'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    # 原词（源语言）
    word = db.Column(db.Text, nullable=False)
    # 译文（目标语言），允许重复
    translation = db.Column(db.Text, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'word': self.word,
            'translation': self.translation
        }
