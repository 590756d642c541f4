"""Static directory of Beninese cities with spelling variants and GPS coordinates."""

from __future__ import annotations

from ..models.domain import City


def _city(name: str, variants: tuple[str, ...], lat: float, lng: float, department: str) -> City:
    return City(name=name, variants=frozenset(variants), lat=lat, lng=lng, department=department)


BENIN_CITIES: tuple[City, ...] = (
    # Littoral / Atlantique
    _city("Cotonou", ("cotonou", "cotono", "kotonou"), 6.3654, 2.4183, "Littoral"),
    _city("Abomey-Calavi", ("abomey calavi", "abomey-calavi", "abomeycalavi", "calavi"), 6.4485, 2.3558, "Atlantique"),
    _city("Ouidah", ("ouidah", "whydah", "ouida"), 6.3631, 2.0853, "Atlantique"),
    _city("Allada", ("allada", "alada"), 6.6667, 2.1500, "Atlantique"),
    _city("Tori-Bossito", ("tori-bossito", "tori bossito", "toribossito", "tori"), 6.5000, 2.1333, "Atlantique"),
    _city("Zè", ("ze", "zè", "zé"), 6.6000, 2.2167, "Atlantique"),
    # Ouémé
    _city("Porto-Novo", ("porto novo", "porto-novo", "portonovo", "portono"), 6.4969, 2.6289, "Ouémé"),
    _city("Sèmè-Kpodji", ("seme kpodji", "sème-kpodji", "semekpodji", "seme-kpodji", "seme", "sème"), 6.3833, 2.6167, "Ouémé"),
    _city("Adjarra", ("adjarra", "adja", "adjara"), 6.5333, 2.6833, "Ouémé"),
    _city("Avrankou", ("avrankou", "avrankour"), 6.5500, 2.6500, "Ouémé"),
    # Plateau
    _city("Pobè", ("pobe", "pobè", "pobé"), 6.9667, 2.6667, "Plateau"),
    _city("Kétou", ("ketou", "kétou", "ketu"), 7.3500, 2.6000, "Plateau"),
    _city("Sakété", ("sakete", "sakété", "sakèté"), 6.7333, 2.6500, "Plateau"),
    # Zou
    _city("Bohicon", ("bohicon", "bohikɔn"), 7.1667, 2.0667, "Zou"),
    _city("Abomey", ("abomey", "abome", "abomè"), 7.1833, 1.9833, "Zou"),
    _city("Covè", ("cove", "covè", "cové", "kove"), 7.2167, 2.3333, "Zou"),
    _city("Zagnanado", ("zagnanado", "zagnando"), 7.2500, 2.3333, "Zou"),
    _city("Djidja", ("djidja", "djija"), 7.3333, 1.9333, "Zou"),
    # Collines
    _city("Dassa-Zoumé", ("dassa zoume", "dassa-zoumé", "dassazoume", "dassa", "dassa-zoumè"), 7.7500, 2.1833, "Collines"),
    _city("Savalou", ("savalou", "savalu"), 7.9333, 1.9833, "Collines"),
    _city("Glazoué", ("glazoue", "glazoué", "glazouè"), 7.9667, 2.2333, "Collines"),
    _city("Bantè", ("bante", "bantè", "banté"), 8.4167, 1.8833, "Collines"),
    _city("Ouèssè", ("ouesse", "ouèssè", "ouessé"), 8.4833, 2.3833, "Collines"),
    # Borgou
    _city("Parakou", ("parakou", "paraku"), 9.3372, 2.6303, "Borgou"),
    _city("Tchaourou", ("tchaourou", "tchaorou", "chaourou"), 8.8833, 2.6000, "Borgou"),
    _city("Nikki", ("nikki", "niki"), 9.9333, 3.2000, "Borgou"),
    _city("Bembèrèkè", ("bembereke", "bembèrèkè", "bemberékè", "bembe"), 10.2167, 2.6667, "Borgou"),
    _city("N'Dali", ("ndali", "n'dali", "n dali"), 9.8500, 2.7167, "Borgou"),
    _city("Pèrèrè", ("perere", "pèrèrè", "péréré"), 9.9667, 3.0000, "Borgou"),
    _city("Kalalé", ("kalale", "kalalé", "kalalè"), 10.2833, 3.3667, "Borgou"),
    _city("Sinendé", ("sinende", "sinendé", "sinendè"), 10.3333, 2.3833, "Borgou"),
    # Alibori
    _city("Kandi", ("kandi", "candi"), 11.1333, 2.9333, "Alibori"),
    _city("Malanville", ("malanville", "malanvil"), 11.8667, 3.3833, "Alibori"),
    _city("Banikoara", ("banikoara", "banikoura"), 11.3000, 2.4333, "Alibori"),
    _city("Gogounou", ("gogounou", "gogonou"), 10.8333, 2.8333, "Alibori"),
    _city("Ségbana", ("segbana", "ségbana", "sègbana"), 10.9333, 3.6833, "Alibori"),
    _city("Karimama", ("karimama", "karimana"), 12.0667, 3.1833, "Alibori"),
    # Atacora
    _city("Natitingou", ("natitingou", "natitigou", "natitingu"), 10.3000, 1.3833, "Atacora"),
    _city("Tanguiéta", ("tanguieta", "tanguiéta", "tanguièta"), 10.6167, 1.2667, "Atacora"),
    _city("Boukoumbé", ("boukoumbe", "boukoumbé", "boukoumbè"), 10.1833, 1.1000, "Atacora"),
    _city("Kouandé", ("kouande", "kouandé", "kouandè", "couandé"), 10.3333, 1.6833, "Atacora"),
    _city("Cobly", ("cobly", "kobly"), 10.4667, 1.0000, "Atacora"),
    _city("Matéri", ("materi", "matéri", "matèri"), 10.7000, 0.9833, "Atacora"),
    _city("Péhunco", ("pehunco", "péhunco", "pèhunco"), 10.2333, 2.0000, "Atacora"),
    _city("Kérou", ("kerou", "kérou", "kèrou"), 10.8333, 2.1167, "Atacora"),
    # Donga
    _city("Djougou", ("djougou", "djugu"), 9.7000, 1.6667, "Donga"),
    _city("Bassila", ("bassila", "basila"), 9.0000, 1.6667, "Donga"),
    _city("Copargo", ("copargo", "kopargo"), 9.8500, 1.5333, "Donga"),
    _city("Ouaké", ("ouake", "ouaké", "ouakè", "wake"), 9.6667, 1.3833, "Donga"),
    # Mono
    _city("Lokossa", ("lokossa", "lokosa"), 6.6333, 1.7167, "Mono"),
    _city("Athiémé", ("athieme", "athiémé", "athièmè"), 6.5667, 1.6667, "Mono"),
    _city("Comé", ("come", "comé", "comè", "kome"), 6.4000, 1.8833, "Mono"),
    _city("Grand-Popo", ("grand popo", "grand-popo", "grandpopo", "gd popo"), 6.2833, 1.8333, "Mono"),
    _city("Bopa", ("bopa",), 6.5500, 1.9833, "Mono"),
    _city("Houéyogbé", ("houeyogbe", "houéyogbé", "houeyogbè"), 6.5167, 1.7833, "Mono"),
    # Couffo
    _city("Aplahoué", ("aplahoue", "aplahoué", "aplahouè"), 6.9333, 1.6833, "Couffo"),
    _city("Dogbo", ("dogbo", "dogbo-tota"), 6.8000, 1.7833, "Couffo"),
    _city("Djakotomey", ("djakotomey", "djakotome"), 6.9000, 1.7167, "Couffo"),
    _city("Klouékanmè", ("klouekanme", "klouékanmè", "klouekanmé"), 7.0333, 1.7833, "Couffo"),
    _city("Lalo", ("lalo",), 6.9167, 1.8667, "Couffo"),
    _city("Toviklin", ("toviklin",), 6.8833, 1.6167, "Couffo"),
)
