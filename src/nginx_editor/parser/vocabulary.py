"""Fixed nginx vocabulary used to classify identifiers.

Both tables are plain data. Lookups are case-insensitive; the priority is
keyword, then directive, then plain.
"""

from nginx_editor.model.token import TokenKind

# Names that introduce a nested { ... } context
BLOCK_KEYWORDS: frozenset[str] = frozenset({
    "http", "events", "server", "location", "upstream", "if", "limit_except",
    "geo", "map", "types", "charset_map", "limit_zone", "split_client",
    "map_hash_bucket_size", "server_names_hash_bucket_size",
    "variables_hash_bucket_size",
})

DIRECTIVES: frozenset[str] = frozenset({
    # Main context
    "user", "worker_processes", "error_log", "pid", "worker_rlimit_nofile",
    "worker_rlimit_core", "worker_priority", "worker_cpu_affinity", "daemon",
    "master_process", "timer_resolution", "working_directory", "env",
    # Events context
    "events", "worker_connections", "use", "accept_mutex", "accept_mutex_delay",
    "multi_accept", "debug_connection", "debug_points", "log_not_found",
    "open_file_cache", "open_file_cache_valid", "open_file_cache_min_uses",
    "open_file_cache_errors", "ignore_invalid_headers",
    # HTTP context
    "http", "include", "default_type", "types", "types_hash_bucket_size",
    "types_hash_max_size", "sendfile", "sendfile_max_chunk", "tcp_nopush",
    "tcp_nodelay", "keepalive_timeout", "keepalive_requests", "keepalive_disable",
    "lingering_close", "lingering_time", "lingering_timeout",
    "reset_timedout_connection", "client_body_buffer_size",
    "client_body_in_file_only", "client_body_in_single_buffer",
    "client_body_timeout", "client_header_buffer_size", "client_header_timeout",
    "client_max_body_size", "large_client_header_buffers", "send_timeout",
    "chunked_transfer_encoding", "gzip", "gzip_comp_level", "gzip_min_length",
    "gzip_buffers", "gzip_proxied", "gzip_vary", "gzip_disable",
    "gzip_http_version", "gzip_types", "gzip_static", "autoindex",
    "autoindex_exact_size", "autoindex_localtime", "autoindex_format",
    "log_format", "access_log", "open_log_file_cache", "server", "listen",
    "server_name", "server_name_in_redirect", "server_names_hash_bucket_size",
    "server_names_hash_max_size", "server_tokens", "location", "root", "alias",
    "index", "try_files", "return", "rewrite", "rewrite_log", "if", "set",
    "break", "location_match", "internal",
    # Proxy / FastCGI / other upstream modules
    "proxy_pass", "proxy_redirect", "proxy_set_header", "proxy_set_body",
    "proxy_hide_header", "proxy_ignore_headers", "proxy_intercept_errors",
    "proxy_connect_timeout", "proxy_send_timeout", "proxy_read_timeout",
    "proxy_buffer_size", "proxy_buffers", "proxy_busy_buffers_size",
    "proxy_temp_file_write_size", "proxy_cache", "proxy_cache_path",
    "proxy_cache_key", "proxy_cache_valid", "proxy_cache_bypass",
    "proxy_no_cache", "proxy_store", "proxy_store_access", "fastcgi_pass",
    "fastcgi_index", "fastcgi_param", "fastcgi_ignore_headers",
    "fastcgi_intercept_errors", "fastcgi_connect_timeout",
    "fastcgi_send_timeout", "fastcgi_read_timeout", "fastcgi_buffer_size",
    "fastcgi_buffers", "fastcgi_busy_buffers_size",
    "fastcgi_temp_file_write_size", "fastcgi_cache", "fastcgi_cache_path",
    "fastcgi_cache_key", "fastcgi_cache_valid", "fastcgi_cache_bypass",
    "fastcgi_store", "uwsgi_pass", "scgi_pass", "memcached_pass", "grpc_pass",
    # Headers, caching, access control
    "add_header", "add_before_body", "add_after_body", "expires", "etag",
    "if_modified_since", "auth_basic", "auth_basic_user_file", "auth_request",
    "auth_request_set", "satisfy", "satisfy_any", "allow", "deny",
    "limit_except", "limit_conn", "limit_conn_zone", "limit_conn_status",
    "limit_rate", "limit_rate_after", "limit_req", "limit_req_zone",
    "limit_req_status",
    # Upstream
    "upstream", "zone", "state", "least_conn", "ip_hash", "random", "hash",
    "keepalive", "ntlm", "websocket", "sticky", "sticky_cookie_insert",
    # SSL
    "ssl", "ssl_certificate", "ssl_certificate_key", "ssl_protocols",
    "ssl_ciphers", "ssl_prefer_server_ciphers", "ssl_session_cache",
    "ssl_session_timeout", "ssl_session_tickets", "ssl_stapling",
    "ssl_stapling_verify", "ssl_trusted_certificate", "ssl_verify_client",
    "ssl_verify_depth", "ssl_password_file", "ssl_ecdh_curve",
})


def classify(identifier: str) -> TokenKind:
    """Classify an identifier against the keyword and directive tables."""
    word = identifier.lower()
    if word in BLOCK_KEYWORDS:
        return TokenKind.KEYWORD
    if word in DIRECTIVES:
        return TokenKind.DIRECTIVE
    return TokenKind.PLAIN
