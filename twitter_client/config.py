from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    TWITTER_BEARER_TOKEN = os.getenv('TWITTER_BEARER_TOKEN')

    STATUS_STREAMING_URL = os.getenv('STATUS_STREAMING_URL', 'https://stream.twitter.com').rstrip('/')
    TWITTER_VERSION = os.getenv('TWITTER_VERSION', '1.1')

    # Seconds without data before the connection is considered stalled
    STREAM_TIMEOUT = float(os.getenv('STREAM_TIMEOUT', '90'))
    USER_AGENT = os.getenv('USER_AGENT', 'twitter-streaming-client')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
