"""cardshuffling 测试包"""
