"""命令行模块。"""
