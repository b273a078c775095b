# Gunicorn configuration file
import os

# Server socket
bind = os.environ.get("BIND", "127.0.0.1:5000")
backlog = 2048

# Each request blocks its worker until the DNSSEC utility exits
workers = int(os.environ.get("WORKERS", 4))
worker_class = "sync"
timeout = 300
keepalive = 2

# Restart workers after this many requests, to help prevent memory leaks
max_requests = 1000
max_requests_jitter = 100

# Logging
accesslog = "/var/log/dnssec-admin/access.log"
errorlog = "/var/log/dnssec-admin/error.log"
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s"'

# Process naming
proc_name = 'dnssec-admin'

daemon = False
pidfile = '/var/run/dnssec-admin/dnssec-admin.pid'
user = 'pdns'
group = 'pdns'
tmp_upload_dir = None
