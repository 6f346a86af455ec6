"""French templates (product default locale)."""
from .bundle import AlertText, Locale, TemplateBundle, register_bundle

FR_BUNDLE = TemplateBundle(
    locale=Locale.FR,

    qol_interpretations={
        "no_data": "Aucune donnée disponible",
        "none": "Aucun impact significatif sur la qualité de vie",
        "mild": "Impact léger sur la qualité de vie",
        "moderate": "Impact modéré sur la qualité de vie",
        "high": "Impact important sur la qualité de vie",
        "very_high": "Impact majeur sur la qualité de vie",
    },
    qol_domain_labels={
        "vasomotor": "les symptômes vasomoteurs (bouffées, sueurs)",
        "psychosocial": "l'aspect psychologique (humeur, anxiété)",
        "physical": "les symptômes physiques (fatigue, douleurs)",
        "sexual": "la santé sexuelle",
    },
    qol_domain_short_labels={
        "vasomotor": "Vasomoteur",
        "psychosocial": "Psychosocial",
        "physical": "Physique",
        "sexual": "Sexuel",
    },
    qol_recommendation_balanced=(
        "Continuez votre suivi régulier pour maintenir ce bon équilibre."
    ),
    qol_recommendation_moderate=(
        "Les données montrent un impact principal sur {domain}. "
        "Une discussion avec votre médecin pourrait aider."
    ),
    qol_recommendation_high=(
        "Le score élevé concernant {domain} suggère de consulter votre médecin "
        "pour discuter d'options thérapeutiques."
    ),
    qol_summary_header="Score MENQOL global: {score}/8",
    qol_summary_domain_line="{label}: {score}/8 ({days} jours)",
    qol_summary_details="Détail par domaine: {details}",
    qol_summary_no_symptoms="Aucun symptôme significatif",

    symptom_labels={
        "hot_flashes": "bouffées de chaleur",
        "night_sweats": "sueurs nocturnes",
        "headaches": "maux de tête",
        "joint_pain": "douleurs articulaires",
        "fatigue": "fatigue",
        "anxiety": "anxiété",
        "irritability": "irritabilité",
        "brain_fog": "brouillard mental",
        "low_mood": "humeur basse",
        "low_libido": "baisse de libido",
        "vaginal_dryness": "sécheresse vaginale",
    },
    weekday_names=("Lundi", "Mardi", "Mercredi", "Jeudi", "Vendredi", "Samedi", "Dimanche"),
    list_joiner=" et ",
    day_singular="jour",
    day_plural="jours",
    mood_trend_title="Tendance humeur",
    mood_trend_up="Votre humeur est en hausse de {pct}% cette semaine",
    mood_trend_down="Votre humeur est en baisse de {pct}% cette semaine",
    sleep_title="Sommeil",
    sleep_better="Vous avez mieux dormi cette semaine (+{delta})",
    sleep_worse="Vous avez moins bien dormi cette semaine ({delta})",
    best_day_title="Meilleure journée",
    best_day_message="{day} était votre meilleur jour (humeur {mood}/5)",
    top_symptoms_title="Symptômes principaux",
    top_symptoms_message="Cette semaine : {symptoms}",
    time_pattern_title="Pattern observé",
    time_pattern_morning="Vos symptômes sont plus fréquents le matin",
    time_pattern_evening="Vos symptômes sont plus fréquents le soir",
    energy_title="Niveau d'énergie",
    energy_message="Votre énergie moyenne est de {avg}/5",
    energy_good="Bon",
    energy_watch="À surveiller",
    consistency_title="Excellent suivi",
    consistency_message="Vous avez complété {count}/7 check-ins cette semaine",

    monthly_overview_title="Vue d'ensemble du mois",
    monthly_overview_message="Humeur: {mood}/5 • Sommeil: {sleep}/10 • Énergie: {energy}/5",
    monthly_symptom_message="Présent {count} jours ce mois-ci",

    alerts={
        "red-flag-suicidal": AlertText(
            title="🆘 Pensées suicidaires",
            message=(
                "Vous n'êtes pas seule. Contactez immédiatement le 3114 (numéro "
                "national de prévention du suicide) ou rendez-vous aux urgences."
            ),
            action="Appeler le 3114",
        ),
        "red-flag-chest-pain": AlertText(
            title="⚠️ Douleurs thoraciques",
            message=(
                "Vous avez signalé des douleurs thoraciques plusieurs fois cette "
                "semaine. Ceci nécessite une consultation médicale URGENTE."
            ),
            action="Consultez immédiatement",
        ),
        "red-flag-palpitations": AlertText(
            title="💔 Palpitations fréquentes",
            message=(
                "Les palpitations fréquentes peuvent nécessiter un suivi cardiaque. "
                "Parlez-en à votre médecin."
            ),
            action="Consulter rapidement",
        ),
        "red-flag-severe-depression": AlertText(
            title="😢 Humeur très basse persistante",
            message=(
                "Votre humeur est très basse depuis au moins 5 jours. Une consultation "
                "avec un professionnel de santé mentale est recommandée."
            ),
            action="Consulter un psychologue",
        ),
        "red-flag-headaches": AlertText(
            title="🤕 Maux de tête intenses",
            message=(
                "Des maux de tête intenses et fréquents peuvent nécessiter une "
                "évaluation médicale pour écarter d'autres causes."
            ),
            action="Consulter votre médecin",
        ),
        "red-flag-insomnia": AlertText(
            title="😴 Insomnie sévère",
            message=(
                "Vous dormez mal depuis au moins une semaine. Un mauvais sommeil "
                "prolongé peut affecter votre santé globale."
            ),
            action="Discuter avec votre médecin",
        ),
        "red-flag-extreme-vasomotor": AlertText(
            title="🔥 Symptômes vasomoteurs intenses",
            message=(
                "Vos bouffées de chaleur ou sueurs sont particulièrement intenses. "
                "Discutez des options de traitement avec votre médecin."
            ),
            action="Envisager un traitement",
        ),
        "red-flag-chronic-fatigue": AlertText(
            title="🪫 Fatigue chronique",
            message=(
                "Une fatigue persistante peut avoir plusieurs causes. Un bilan "
                "sanguin (thyroïde, fer, vitamine D) pourrait être utile."
            ),
            action="Demander un bilan",
        ),
    },

    encouragement_positive=(
        "C'est merveilleux de vous sentir si bien ! 🌸",
        "Quelle belle journée ! Continuez sur cette lancée ! ✨",
        "Votre positivité est inspirante ! 💪",
        "Gardez cette belle énergie ! 🌟",
    ),
    encouragement_negative=(
        "Les jours difficiles font partie du parcours. Vous n'êtes pas seule. 💗",
        "Prenez soin de vous aujourd'hui. Demain sera différent. 🌸",
        "Votre courage face aux difficultés est admirable. 💪",
        "N'hésitez pas à en parler avec votre médecin ou un proche. 🤗",
    ),
    encouragement_neutral="Merci de partager votre ressenti. Chaque jour compte. 🌿",
    empathetic_fallbacks=(
        "Je t'écoute. 🌸 Peux-tu m'en dire un peu plus sur ce que tu ressens ?",
        "Merci de te confier à moi. Ce que tu vis est tout à fait légitime.",
        "Je comprends que cette période puisse être difficile. Tu n'es pas seule.",
        "C'est important que tu puisses exprimer ce que tu ressens. Je suis là pour t'écouter.",
        "Je suis là pour toi. 💗 Comment puis-je t'aider aujourd'hui ?",
    ),

    digest_header="Contexte de l'utilisatrice:",
    digest_sentiment_line=(
        "- Ressenti des notes: moyenne {average} ({direction}), "
        "{positive} positives, {negative} négatives, {neutral} neutres sur {total}"
    ),
    digest_no_sentiment="- Ressenti des notes: pas encore de notes analysées",
    digest_directions={
        "improving": "en amélioration",
        "declining": "en baisse",
        "stable": "stable",
    },
    digest_symptoms_line="- Symptômes récents: {symptoms}",
    intensity_words=("", "légers", "modérés", "sévères"),
)

register_bundle(FR_BUNDLE)
