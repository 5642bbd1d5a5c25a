"""SV - query and control processes managed by supervisord."""
