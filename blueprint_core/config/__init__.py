"""配置层：进程级 Settings 与单次调用的 Provider 配置解析。"""
