"""核心引擎的异常类型。

ValidationError 直接沿用 django.core.exceptions.ValidationError。
"""

from django.core.exceptions import ObjectDoesNotExist
from django.db import DatabaseError


class NotFoundError(ObjectDoesNotExist):
    """引用的任务、患者、分类或题目不存在。"""


# 存储层错误原样向上抛出，核心层不捕获也不重试。
PersistenceError = DatabaseError
