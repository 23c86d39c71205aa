from django.apps import AppConfig


class PatientsConfig(AppConfig):
    """
    【业务说明】患者参照数据 App，仅提供任务与查房答题所需的患者锚点。
    【用法】settings INSTALLED_APPS 中列出 'patients' 即可。
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'patients'
    verbose_name = '患者'
