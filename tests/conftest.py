"""Pytest configuration and fixtures for nginx-editor tests."""

from pathlib import Path

import pytest


@pytest.fixture
def sample_nginx_conf():
    """A realistic, already formatted nginx.conf."""
    return '''user www-data;
worker_processes auto;
pid /run/nginx.pid;

events {
  worker_connections 768;
}

http {
  sendfile on;
  keepalive_timeout 65s;
  include /etc/nginx/mime.types;

  # Proxy to the app servers
  upstream backend {
    server 127.0.0.1:8080;
    keepalive 32;
  }

  server {
    listen 80 default_server;
    server_name example.com www.example.com;
    root /var/www/html;

    location / {
      try_files $uri $uri/ /index.php?$query_string;
    }

    location /api {
      proxy_pass http://backend;
      proxy_set_header Host $host;
      proxy_read_timeout 1.5m;
    }
  }
}
'''


@pytest.fixture
def messy_nginx_conf():
    """The same structure with broken indentation and spacing."""
    return '''

user www-data;
worker_processes auto;
pid /run/nginx.pid;

events{
worker_connections 768;
        }



http   {
    sendfile on;
	keepalive_timeout 65s;
include /etc/nginx/mime.types;

     # Proxy to the app servers
upstream backend{
server 127.0.0.1:8080;
  keepalive 32;
}

server {
listen 80 default_server;
server_name example.com www.example.com;
   root /var/www/html;

location / {
try_files $uri $uri/ /index.php?$query_string;
}

location /api{
proxy_pass http://backend;
proxy_set_header Host $host;
proxy_read_timeout 1.5m;
    }
  }
}


'''


@pytest.fixture
def settings_dir(tmp_path: Path) -> Path:
    """Isolated settings directory."""
    return tmp_path / "nginx-editor"
