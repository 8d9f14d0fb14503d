from django.apps import AppConfig


class BahtTextConfig(AppConfig):
    name = "bahttext"
    verbose_name = "คำอ่านจำนวนเงินบาท"
