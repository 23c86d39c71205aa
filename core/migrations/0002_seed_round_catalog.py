from django.db import migrations

CATEGORIES = [
    (1, "Sistema Nutricional", "apple"),
    (2, "Hídrico", "droplet"),
    (3, "Hemodinâmico", "heart-pulse"),
    (4, "Hematológico", "beaker"),
    (5, "Hepático", "liver"),
    (6, "Respiratório", "lungs"),
    (7, "Fisioterapia", "dumbbell"),
    (8, "Neurológico", "brain"),
    (9, "Farmácia", "pill"),
    (10, "Gerenciamento de Risco", "shield"),
    (11, "Família", "users"),
    (12, "Avaliação de Alta", "home"),
]

QUESTIONS = [
    (1, 1, "NUTRIÇÃO ADEQUADA? (INICIAR ORAL/ENTERAL/NPT)"),
    (2, 1, "TOLERÂNCIA À ALIMENTAÇÃO (VÔMITOS)?"),
    (3, 1, "RELATA DIARRÉIA OU CONSTIPAÇÃO?"),
    (4, 1, "GLICEMIA CONTROLADA? (DX 60-150)"),
    (5, 1, "NECESSIDADE DE PROFILAXIA PARA ÚLCERA DE ESTRESSE?"),
    (6, 1, "NECESSIDADE DE CONTROLE DE RESÍDUO GÁSTRICO?"),
    (7, 1, "FIXAÇÃO DE SNGE/SNE OK?"),
    (8, 1, "NECESSIDADE DE RX DE ABDOMEN PARA CHECAR SONDA?"),
    (9, 2, "HÁ SINAIS DE SOBRECARGA HÍDRICA CLÍNICA?"),
    (10, 2, "BH POSITIVO >3% NAS ÚLTIMAS 24 HORAS?"),
    (11, 3, "APARELHO DE PANI ADEQUADO?"),
]


def seed_catalog(apps, schema_editor):
    """
    写入病房查房的固定分类与题目：
    - 分类 ID 与前端图标约定一一对应，必须使用固定主键；
    - 已存在的记录不覆盖，便于后台人工调整文案。
    """
    RoundCategory = apps.get_model("core", "RoundCategory")
    RoundQuestion = apps.get_model("core", "RoundQuestion")

    for seq, (category_id, name, icon) in enumerate(CATEGORIES, start=1):
        RoundCategory.objects.get_or_create(
            id=category_id,
            defaults={"name": name, "icon": icon, "sort_order": seq},
        )

    question_seq = {}
    for question_id, category_id, text in QUESTIONS:
        question_seq[category_id] = question_seq.get(category_id, 0) + 1
        RoundQuestion.objects.get_or_create(
            id=question_id,
            defaults={
                "category_id": category_id,
                "text": text,
                "seq": question_seq[category_id],
            },
        )


class Migration(migrations.Migration):

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_catalog, migrations.RunPython.noop),
    ]
