# gunicorn.conf.py
# Run with: gunicorn -c gunicorn.conf.py app:app
import os

accesslog = '-'
errorlog = '-'

bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"

# Each worker holds its own copy of the loaded translations, so keep the count low
workers = int(os.getenv('WEB_CONCURRENCY', 2))
worker_class = "gthread"
threads = 4

timeout = 60  # Full-corpus searches are the slowest requests
proc_name = "bible_reader"
