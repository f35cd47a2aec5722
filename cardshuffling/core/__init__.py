"""
Core Module - 纯领域逻辑层

该模块包含洗牌随机性分析的核心逻辑。
核心模块只能依赖其他核心模块，不能依赖应用层。

Modules:
    deck: 扑克牌、牌组和牌面文本编码
    shuffles: 洗牌分类、排列运算和经验洗牌推导
    comparators: 排名比较器
    generators: 洗牌生成器
    simulation: 模拟运行与结果输出
"""

__all__ = ['deck', 'shuffles', 'comparators', 'generators', 'simulation']
