"""核心业务模型通用枚举。"""

from django.db import models


class TaskStatus(models.TextChoices):
    """查房任务的落库状态（persisted status）。

    no_prazo 只由截止时间推导，从不落库。
    """

    ALERTA = "alerta", "Alerta"
    FORA_DO_PRAZO = "fora_do_prazo", "Fora do Prazo"
    CONCLUIDO = "concluido", "Concluído"


class LiveStatus(models.TextChoices):
    """查房任务的实时状态，读取时按截止时间现算。"""

    ALERTA = "alerta", "Alertas"
    NO_PRAZO = "no_prazo", "No Prazo"
    FORA_DO_PRAZO = "fora_do_prazo", "Fora do Prazo"
    CONCLUIDO = "concluido", "Concluídos"


class Responsible(models.TextChoices):
    """任务责任方（固定角色列表）。"""

    MEDICO = "Médico", "Médico"
    ENFERMEIRO = "Enfermeiro", "Enfermeiro"
    FISIOTERAPEUTA = "Fisioterapeuta", "Fisioterapeuta"
    FARMACEUTICO = "Farmacêutico", "Farmacêutico"
    ODONTOLOGO = "Odontólogo", "Odontólogo"
    MEDICO_ENFERMEIRO = "Médico / Enfermeiro", "Médico / Enfermeiro"
    MEDICO_FISIOTERAPEUTA = "Médico / Fisioterapeuta", "Médico / Fisioterapeuta"


class ChecklistAnswerValue(models.TextChoices):
    """查房题目的三种回答，任何一种都算“已作答”。"""

    SIM = "sim", "Sim"
    NAO = "não", "Não"
    NAO_SE_APLICA = "nao_se_aplica", "Não se aplica"
