"""UI string tables, keyed by language code then by dot-notation section."""

from typing import Dict

TRANSLATIONS: Dict[str, Dict[str, Dict[str, str]]] = {
    "en": {
        "app": {"name": "HowTo"},
        "home": {
            "title": "What do you want to learn?",
            "subtitle": "Videos, articles and an AI guide for any how-to question",
            "searchPlaceholder": "How to...",
            "trending": "Trending searches",
            "saved": "Saved",
            "settings": "Settings",
        },
        "results": {
            "resultsFor": "Results for",
            "aiSummary": "AI Summary",
            "generatedUsing": "Generated from the videos and articles below",
            "step": "Step",
            "videos": "Videos",
            "articles": "Articles",
            "noVideos": "No videos found",
            "noArticles": "No articles found",
            "followUpQuestion": "Have a follow-up question?",
            "errorTitle": "Invalid search",
            "searchError": "Search failed",
            "tryAnotherSearch": "Try another search",
            "retry": "Try again",
            "save": "Save",
            "saved": "Saved",
        },
        "saved": {
            "myTutorials": "My Tutorials",
            "savedDate": "Saved on",
            "empty": "You have not saved any tutorials yet",
            "deleted": "Tutorial deleted",
            "notFound": "Tutorial not found",
        },
        "settings": {
            "settings": "Settings",
            "language": "Language",
            "darkMode": "Dark mode",
            "on": "on",
            "off": "off",
        },
    },
    "es": {
        "app": {"name": "HowTo"},
        "home": {
            "title": "¿Qué quieres aprender?",
            "searchPlaceholder": "Cómo...",
            "trending": "Búsquedas populares",
            "saved": "Guardados",
            "settings": "Configuración",
        },
        "results": {
            "resultsFor": "Resultados para",
            "aiSummary": "Resumen de IA",
            "step": "Paso",
            "videos": "Videos",
            "articles": "Artículos",
            "searchError": "La búsqueda falló",
            "retry": "Intentar de nuevo",
            "save": "Guardar",
            "saved": "Guardado",
        },
        "saved": {"myTutorials": "Mis tutoriales", "savedDate": "Guardado el"},
        "settings": {"settings": "Configuración", "language": "Idioma", "darkMode": "Modo oscuro"},
    },
    "fr": {
        "app": {"name": "HowTo"},
        "home": {
            "title": "Que voulez-vous apprendre ?",
            "searchPlaceholder": "Comment...",
            "saved": "Enregistrés",
            "settings": "Paramètres",
        },
        "results": {
            "resultsFor": "Résultats pour",
            "aiSummary": "Résumé IA",
            "step": "Étape",
            "videos": "Vidéos",
            "articles": "Articles",
            "searchError": "La recherche a échoué",
            "retry": "Réessayer",
            "save": "Enregistrer",
            "saved": "Enregistré",
        },
        "saved": {"myTutorials": "Mes tutoriels", "savedDate": "Enregistré le"},
        "settings": {"settings": "Paramètres", "language": "Langue", "darkMode": "Mode sombre"},
    },
    "de": {
        "app": {"name": "HowTo"},
        "home": {
            "title": "Was möchtest du lernen?",
            "searchPlaceholder": "Wie man...",
            "saved": "Gespeichert",
            "settings": "Einstellungen",
        },
        "results": {
            "resultsFor": "Ergebnisse für",
            "aiSummary": "KI-Zusammenfassung",
            "step": "Schritt",
            "videos": "Videos",
            "articles": "Artikel",
            "searchError": "Suche fehlgeschlagen",
            "retry": "Erneut versuchen",
            "save": "Speichern",
            "saved": "Gespeichert",
        },
        "saved": {"myTutorials": "Meine Anleitungen", "savedDate": "Gespeichert am"},
        "settings": {"settings": "Einstellungen", "language": "Sprache", "darkMode": "Dunkelmodus"},
    },
    "it": {
        "app": {"name": "HowTo"},
        "home": {"title": "Cosa vuoi imparare?", "searchPlaceholder": "Come...", "settings": "Impostazioni"},
        "results": {
            "resultsFor": "Risultati per",
            "aiSummary": "Riepilogo IA",
            "step": "Passo",
            "videos": "Video",
            "articles": "Articoli",
            "save": "Salva",
            "saved": "Salvato",
        },
        "saved": {"myTutorials": "I miei tutorial"},
        "settings": {"settings": "Impostazioni", "language": "Lingua", "darkMode": "Modalità scura"},
    },
    "ja": {
        "app": {"name": "HowTo"},
        "home": {"title": "何を学びたいですか？", "searchPlaceholder": "…の方法", "settings": "設定"},
        "results": {
            "resultsFor": "検索結果:",
            "aiSummary": "AI要約",
            "step": "ステップ",
            "videos": "動画",
            "articles": "記事",
            "save": "保存",
            "saved": "保存済み",
        },
        "saved": {"myTutorials": "マイチュートリアル"},
        "settings": {"settings": "設定", "language": "言語", "darkMode": "ダークモード"},
    },
    "zh": {
        "app": {"name": "HowTo"},
        "home": {"title": "你想学什么？", "searchPlaceholder": "如何……", "settings": "设置"},
        "results": {
            "resultsFor": "搜索结果：",
            "aiSummary": "AI 摘要",
            "step": "步骤",
            "videos": "视频",
            "articles": "文章",
            "save": "保存",
            "saved": "已保存",
        },
        "saved": {"myTutorials": "我的教程"},
        "settings": {"settings": "设置", "language": "语言", "darkMode": "深色模式"},
    },
    "ar": {
        "app": {"name": "HowTo"},
        "home": {"title": "ماذا تريد أن تتعلم؟", "settings": "الإعدادات"},
        "results": {
            "resultsFor": "نتائج",
            "aiSummary": "ملخص الذكاء الاصطناعي",
            "step": "الخطوة",
            "videos": "فيديوهات",
            "articles": "مقالات",
            "save": "حفظ",
        },
        "settings": {"settings": "الإعدادات", "language": "اللغة"},
    },
    "pt": {
        "app": {"name": "HowTo"},
        "home": {"title": "O que você quer aprender?", "searchPlaceholder": "Como...", "settings": "Configurações"},
        "results": {
            "resultsFor": "Resultados para",
            "aiSummary": "Resumo de IA",
            "step": "Passo",
            "videos": "Vídeos",
            "articles": "Artigos",
            "save": "Salvar",
            "saved": "Salvo",
        },
        "saved": {"myTutorials": "Meus tutoriais"},
        "settings": {"settings": "Configurações", "language": "Idioma", "darkMode": "Modo escuro"},
    },
    "ru": {
        "app": {"name": "HowTo"},
        "home": {"title": "Чему вы хотите научиться?", "searchPlaceholder": "Как...", "settings": "Настройки"},
        "results": {
            "resultsFor": "Результаты для",
            "aiSummary": "Сводка ИИ",
            "step": "Шаг",
            "videos": "Видео",
            "articles": "Статьи",
            "save": "Сохранить",
            "saved": "Сохранено",
        },
        "saved": {"myTutorials": "Мои руководства"},
        "settings": {"settings": "Настройки", "language": "Язык", "darkMode": "Тёмная тема"},
    },
    "ko": {
        "app": {"name": "HowTo"},
        "home": {"title": "무엇을 배우고 싶으세요?", "settings": "설정"},
        "results": {
            "resultsFor": "검색 결과:",
            "aiSummary": "AI 요약",
            "step": "단계",
            "videos": "동영상",
            "articles": "기사",
            "save": "저장",
        },
        "settings": {"settings": "설정", "language": "언어", "darkMode": "다크 모드"},
    },
}
