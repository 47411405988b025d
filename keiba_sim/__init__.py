"""競馬トーナメントシミュレータ"""

__version__ = "0.1.0"
