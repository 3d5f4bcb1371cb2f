def make_log_tag(file, resource, method, ip=None, **kwargs):
    log_tag = f"[{file}][{resource}][{method}]"

    if ip:
        log_tag += f"[ip:{ip}]"

    # Append extra context fields
    for key, value in kwargs.items():
        log_tag += f"[{key}:{value}]"

    return log_tag
