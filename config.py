# config.py
import os

class Config:
    # 数据库连接信息，默认使用本地 SQLite 文件（不存在时自动创建）
    # 格式: sqlite:///文件路径
    SQLALCHEMY_DATABASE_URI = os.getenv('DB_URL', 'sqlite:///vocab.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # 服务监听地址，端口固定为常量
    HOST = '0.0.0.0'
    PORT = 3000
