"""English templates."""
from .bundle import AlertText, Locale, TemplateBundle, register_bundle

EN_BUNDLE = TemplateBundle(
    locale=Locale.EN,

    qol_interpretations={
        "no_data": "No data available",
        "none": "No significant impact on quality of life",
        "mild": "Mild impact on quality of life",
        "moderate": "Moderate impact on quality of life",
        "high": "High impact on quality of life",
        "very_high": "Very high impact on quality of life",
    },
    qol_domain_labels={
        "vasomotor": "vasomotor symptoms (hot flashes, sweats)",
        "psychosocial": "psychological symptoms (mood, anxiety)",
        "physical": "physical symptoms (fatigue, pain)",
        "sexual": "sexual health",
    },
    qol_domain_short_labels={
        "vasomotor": "Vasomotor",
        "psychosocial": "Psychosocial",
        "physical": "Physical",
        "sexual": "Sexual",
    },
    qol_recommendation_balanced="Keep tracking regularly to maintain this good balance.",
    qol_recommendation_moderate=(
        "Your data suggests the main impact is on {domain}. "
        "A discussion with your doctor could help."
    ),
    qol_recommendation_high=(
        "A high score for {domain} suggests you should consult your doctor "
        "to discuss treatment options."
    ),
    qol_summary_header="Overall MENQOL score: {score}/8",
    qol_summary_domain_line="{label}: {score}/8 ({days} days)",
    qol_summary_details="Domain breakdown: {details}",
    qol_summary_no_symptoms="No significant symptoms",

    symptom_labels={
        "hot_flashes": "hot flashes",
        "night_sweats": "night sweats",
        "headaches": "headaches",
        "joint_pain": "joint pain",
        "fatigue": "fatigue",
        "anxiety": "anxiety",
        "irritability": "irritability",
        "brain_fog": "brain fog",
        "low_mood": "low mood",
        "low_libido": "low libido",
        "vaginal_dryness": "vaginal dryness",
    },
    weekday_names=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    list_joiner=" and ",
    day_singular="day",
    day_plural="days",
    mood_trend_title="Mood trend",
    mood_trend_up="Your mood is up by {pct}% this week",
    mood_trend_down="Your mood is down by {pct}% this week",
    sleep_title="Sleep",
    sleep_better="You slept better this week (+{delta})",
    sleep_worse="You slept worse this week ({delta})",
    best_day_title="Best day",
    best_day_message="{day} was your best day (mood {mood}/5)",
    top_symptoms_title="Top symptoms",
    top_symptoms_message="This week: {symptoms}",
    time_pattern_title="Pattern spotted",
    time_pattern_morning="Your symptoms are more frequent in the morning",
    time_pattern_evening="Your symptoms are more frequent in the evening",
    energy_title="Energy level",
    energy_message="Your average energy is {avg}/5",
    energy_good="Good",
    energy_watch="To watch",
    consistency_title="Great consistency",
    consistency_message="You completed {count}/7 check-ins this week",

    monthly_overview_title="Monthly overview",
    monthly_overview_message="Mood: {mood}/5 • Sleep: {sleep}/10 • Energy: {energy}/5",
    monthly_symptom_message="Present {count} days this month",

    alerts={
        "red-flag-suicidal": AlertText(
            title="🆘 Suicidal thoughts",
            message=(
                "You are not alone. Call a suicide prevention hotline right now "
                "(3114 in France, 988 in the US) or go to the nearest emergency room."
            ),
            action="Call a crisis hotline",
        ),
        "red-flag-chest-pain": AlertText(
            title="⚠️ Chest pain",
            message=(
                "You reported chest pain several times this week. "
                "This needs URGENT medical attention."
            ),
            action="Seek care immediately",
        ),
        "red-flag-palpitations": AlertText(
            title="💔 Frequent palpitations",
            message=(
                "Frequent palpitations may need a cardiac check-up. "
                "Talk to your doctor about it."
            ),
            action="See a doctor soon",
        ),
        "red-flag-severe-depression": AlertText(
            title="😢 Persistently very low mood",
            message=(
                "Your mood has been very low for at least 5 days. Seeing a mental "
                "health professional is recommended."
            ),
            action="See a psychologist",
        ),
        "red-flag-headaches": AlertText(
            title="🤕 Intense headaches",
            message=(
                "Frequent intense headaches may need a medical evaluation to rule "
                "out other causes."
            ),
            action="See your doctor",
        ),
        "red-flag-insomnia": AlertText(
            title="😴 Severe insomnia",
            message=(
                "You have been sleeping poorly for at least a week. Prolonged poor "
                "sleep can affect your overall health."
            ),
            action="Discuss with your doctor",
        ),
        "red-flag-extreme-vasomotor": AlertText(
            title="🔥 Intense vasomotor symptoms",
            message=(
                "Your hot flashes or night sweats are particularly intense. "
                "Discuss treatment options with your doctor."
            ),
            action="Consider treatment",
        ),
        "red-flag-chronic-fatigue": AlertText(
            title="🪫 Chronic fatigue",
            message=(
                "Persistent fatigue can have several causes. A blood test "
                "(thyroid, iron, vitamin D) could be useful."
            ),
            action="Ask for a blood test",
        ),
    },

    encouragement_positive=(
        "It's wonderful to hear you're feeling good! 🌸",
        "What a lovely day, keep it up! ✨",
        "Your positivity is inspiring! 💪",
        "Hold on to that great energy! 🌟",
    ),
    encouragement_negative=(
        "Hard days are part of the journey. You're not alone. 💗",
        "Be gentle with yourself today. Tomorrow can feel different. 🌸",
        "Your courage through difficulties is admirable. 💪",
        "If you can, consider talking to your doctor or someone you trust. 🤗",
    ),
    encouragement_neutral="Thank you for sharing how you feel. Every day counts. 🌿",
    empathetic_fallbacks=(
        "I'm listening. 🌸 Can you tell me a bit more about how you feel?",
        "Thank you for confiding in me. What you're going through is completely valid.",
        "I understand this period can be difficult. You're not alone.",
        "It matters that you can express how you feel. I'm here to listen.",
        "I'm here for you. 💗 How can I help you today?",
    ),

    digest_header="User context:",
    digest_sentiment_line=(
        "- Journal sentiment: average {average} ({direction}), "
        "{positive} positive, {negative} negative, {neutral} neutral out of {total}"
    ),
    digest_no_sentiment="- Journal sentiment: no analyzed notes yet",
    digest_directions={
        "improving": "improving",
        "declining": "declining",
        "stable": "stable",
    },
    digest_symptoms_line="- Recent symptoms: {symptoms}",
    intensity_words=("", "mild", "moderate", "severe"),
)

register_bundle(EN_BUNDLE)
