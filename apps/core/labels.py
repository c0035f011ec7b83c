"""
User-facing text for the dashboard in English and Hindi.

Every key exists in both tables; templates read labels only through
labels_for() so a language switch never touches the figures on the page.
"""

ENGLISH = 'en'
HINDI = 'hi'

LANGUAGES = (ENGLISH, HINDI)
DEFAULT_LANGUAGE = ENGLISH

LABELS = {
    ENGLISH: {
        # header / navigation
        'site_title': 'MGNREGA — District View',
        'site_tagline': 'Simple, local-friendly insights',
        'nav_home': 'Home',
        'nav_state_comparison': 'State Comparison',
        'nav_compare': 'Compare',
        'nav_about': 'About',
        'nav_contact': 'Contact',
        'language_toggle': 'हिन्दी',
        'language_toggle_aria': 'Toggle language',
        'footer': 'Built for Bihar • Data from public MGNREGA sources',

        # dashboard
        'dashboard_title': 'District Performance',
        'select_district': 'Select District',
        'choose_district': '-- Choose district --',
        'show': 'Show',
        'detect_district': 'Detect my district',
        'select_prompt': 'Select a district or use "Detect my district" to begin.',
        'kpi_individuals': 'Total Individuals',
        'kpi_individuals_hint': 'Total individuals worked',
        'kpi_expenditure': 'Total Expenditure',
        'kpi_expenditure_hint': 'Total exp (last month)',
        'kpi_avg_days': 'Avg days/HH',
        'kpi_avg_days_hint': 'Average days of employment',
        'chart_persondays': 'Monthly Persondays',
        'chart_expenditure': 'Monthly Expenditure',
        'summary_title': 'Summary',
        'summary_text': (
            'This data is sourced from public APIs and will be refreshed periodically. '
            'If the upstream API is down, the last stored snapshot will be shown.'
        ),
        'sample_badge': 'Sample data',

        # notices
        'notice_fetch_failed': 'Failed to fetch live data, showing sample instead.',
        'notice_geo_unsupported': 'Geolocation not available on this device',
        'notice_geo_denied': 'Location permission denied or unavailable',
        'notice_detect_no_match': 'Could not auto-detect district. Please select from list.',
        'notice_detect_failed': 'Auto-detect failed — please select manually.',
        'notice_detect_success': 'Detected district: {name}',
        'notice_feedback_thanks': 'Thank you! Your feedback has been received.',

        # state comparison
        'state_title': 'State Performance Comparison',
        'state_years': 'Financial years',
        'state_apply': 'Apply',
        'state_expenditure': 'Monthly Expenditure',
        'state_households': 'Total Households Worked',

        # district comparison
        'compare_title': 'Compare Districts',
        'compare_first': 'First district',
        'compare_second': 'Second district',
        'compare_select': 'Select district',
        'compare_persondays': 'Monthly persondays',
        'compare_side_by_side': 'Side-by-side numbers',
        'compare_district_a': 'District A',
        'compare_district_b': 'District B',
        'compare_total_persondays': 'Total persondays',
        'compare_total_expenditure': 'Total expenditure',
        'compare_tip': 'Tip: compare persondays and expenditure to see workload vs spend.',
        'compare_button': 'Compare',

        # about / contact
        'about_title': 'What is MGNREGA?',
        'about_text': (
            'MGNREGA is a rural employment guarantee scheme. '
            'This site presents district performance in simple language and charts.'
        ),
        'contact_title': 'Contact / Feedback',
        'contact_intro': 'Simple feedback form — stores to backend or sends email.',
        'contact_name': 'Name',
        'contact_contact': 'Mobile / Email',
        'contact_message': 'Message',
        'contact_submit': 'Submit',
    },
    HINDI: {
        'site_title': 'मनरेगा — ज़िला दृश्य',
        'site_tagline': 'सरल, स्थानीय जानकारी',
        'nav_home': 'मुख्‍य पृष्ठ',
        'nav_state_comparison': 'राज्य तुलना',
        'nav_compare': 'तुलना',
        'nav_about': 'जानकारी',
        'nav_contact': 'संपर्क',
        'language_toggle': 'EN',
        'language_toggle_aria': 'भाषा बदलें',
        'footer': 'बिहार के लिए बनाया गया • सार्वजनिक मनरेगा स्रोतों से डेटा',

        'dashboard_title': 'जिला प्रदर्शन',
        'select_district': 'जिला चुनें',
        'choose_district': '-- जिला चुनें --',
        'show': 'दिखाएँ',
        'detect_district': 'मेरा जिला पहचानें',
        'select_prompt': 'शुरू करने के लिए जिला चुनें या "मेरा जिला पहचानें" का उपयोग करें।',
        'kpi_individuals': 'कुल व्यक्ति',
        'kpi_individuals_hint': 'कुल लोगों ने काम किया',
        'kpi_expenditure': 'कुल खर्च (लाख)',
        'kpi_expenditure_hint': 'कुल खर्च',
        'kpi_avg_days': 'औसत दिनों/घरेलू',
        'kpi_avg_days_hint': 'औसत रोजगार दिन',
        'chart_persondays': 'मासिक व्यक्ति-दिन (Persondays)',
        'chart_expenditure': 'मासिक खर्च',
        'summary_title': 'सारांश',
        'summary_text': (
            'यह डेटा सार्वजनिक स्रोत से लिया गया है और समय-समय पर अपडेट किया जाएगा। '
            'अगर API डाउन है, तो पिछला स्टोर किया गया डेटा दिखेगा।'
        ),
        'sample_badge': 'नमूना डेटा',

        'notice_fetch_failed': 'लाइव डेटा नहीं मिल सका, नमूना डेटा दिखाया जा रहा है।',
        'notice_geo_unsupported': 'इस डिवाइस पर स्थान सेवा उपलब्ध नहीं है',
        'notice_geo_denied': 'स्थान की अनुमति नहीं मिली या उपलब्ध नहीं है',
        'notice_detect_no_match': 'जिला अपने-आप नहीं पहचाना जा सका। कृपया सूची से चुनें।',
        'notice_detect_failed': 'स्वतः पहचान विफल — कृपया स्वयं चुनें।',
        'notice_detect_success': 'पहचाना गया जिला: {name}',
        'notice_feedback_thanks': 'धन्यवाद! आपकी प्रतिक्रिया मिल गई है।',

        'state_title': 'राज्य प्रदर्शन तुलना',
        'state_years': 'वित्तीय वर्ष',
        'state_apply': 'लागू करें',
        'state_expenditure': 'मासिक खर्च',
        'state_households': 'कुल परिवारों ने काम किया',

        'compare_title': 'जिला तुलना',
        'compare_first': 'पहला जिला',
        'compare_second': 'दूसरा जिला',
        'compare_select': 'जिला चुनें',
        'compare_persondays': 'मासिक व्यक्ति-दिन',
        'compare_side_by_side': 'आमने-सामने आंकड़े',
        'compare_district_a': 'जिला A',
        'compare_district_b': 'जिला B',
        'compare_total_persondays': 'कुल व्यक्ति-दिन',
        'compare_total_expenditure': 'कुल खर्च',
        'compare_tip': 'सुझाव: काम और खर्च की तुलना के लिए व्यक्ति-दिन और खर्च देखें।',
        'compare_button': 'तुलना करें',

        'about_title': 'MGNREGA क्या है?',
        'about_text': (
            'MGNREGA एक ग्रामीण रोजगार गारंटी योजना है। '
            'यह साइट आपके जिले के प्रदर्शन को सरल भाषा और चार्ट में दिखाती है।'
        ),
        'contact_title': 'संपर्क करें',
        'contact_intro': 'सरल प्रतिक्रिया फॉर्म',
        'contact_name': 'नाम',
        'contact_contact': 'मोबाइल / ईमेल',
        'contact_message': 'संदेश',
        'contact_submit': 'जमा करें',
    },
}


def normalize_language(lang):
    return lang if lang in LANGUAGES else DEFAULT_LANGUAGE


def labels_for(lang):
    return LABELS[normalize_language(lang)]


def toggle_language(lang):
    return HINDI if normalize_language(lang) == ENGLISH else ENGLISH
