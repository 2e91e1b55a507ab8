"""Gunicorn production configuration.

Run with: gunicorn -c gunicorn.conf.py easybizness_mail.main:app
"""
import multiprocessing
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '5174')}"
workers = int(os.environ.get("WEB_CONCURRENCY", multiprocessing.cpu_count() * 2 + 1))
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 1000
timeout = 120
keepalive = 5
max_requests = 1000
max_requests_jitter = 100
preload_app = True
accesslog = "-"
errorlog = "-"
loglevel = "info"
