"""视场角色判定策略

角色判定与算法解耦: 任何 ``camera_id -> FieldRole`` 的函数都可作为策略.
GWAC 约定: 相机编号为 5 的倍数时对应 FFoV.
"""

from __future__ import annotations

from typing import Callable

from relpos.core.models import FieldRole

RolePolicy = Callable[[str], FieldRole]

DEFAULT_REFERENCE_MODULUS = 5


def modulus_role_policy(modulus: int = DEFAULT_REFERENCE_MODULUS) -> RolePolicy:
    """相机编号整除 modulus 时判定为 FFoV, 否则为 JFoV

    Raises:
        ValueError: modulus 非正
    """
    if modulus <= 0:
        raise ValueError(f"modulus 必须为正整数, got {modulus}")

    def policy(camera_id: str) -> FieldRole:
        try:
            number = int(camera_id)
        except (TypeError, ValueError):
            raise ValueError(f"相机标志不是数字: {camera_id!r}") from None
        if number % modulus == 0:
            return FieldRole.REFERENCE
        return FieldRole.FOLLOWER

    return policy


default_role_policy = modulus_role_policy(DEFAULT_REFERENCE_MODULUS)
