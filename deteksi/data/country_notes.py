"""Curated Indonesian-language notes shown on the country detail page.

REST Countries carries no narrative or government data, so the detail page
falls back to these tables, keyed by the common English country name.
"""

COUNTRY_HISTORIES: dict[str, dict] = {
    "Indonesia": {
        "history": "Republik Indonesia adalah negara kepulauan terbesar di dunia yang merdeka pada 17 Agustus 1945. Memiliki sejarah panjang sebagai jalur perdagangan rempah-rempah dunia dan kini berkembang pesat dengan ekonomi digital dan pariwisata.",
        "sectors": ["Pertanian & Kelapa Sawit", "Pertambangan Batubara", "Manufaktur Tekstil", "Pariwisata", "Teknologi Digital", "Perikanan", "Kehutanan"],
    },
    "Malaysia": {
        "history": "Malaysia adalah negara federal yang terdiri dari 13 negeri dan 3 wilayah federal. Negara ini dikenal sebagai pusat keuangan Islam dan penghasil minyak kelapa sawit terbesar dunia.",
        "sectors": ["Minyak Kelapa Sawit", "Teknologi & Elektronik", "Keuangan Islam", "Pariwisata Halal", "Otomotif", "Petrokimia"],
    },
    "Singapore": {
        "history": "Singapura adalah negara kota yang berkembang dari pelabuhan perdagangan menjadi pusat keuangan global dan hub teknologi terdepan di Asia Tenggara.",
        "sectors": ["Keuangan & Perbankan", "Teknologi Fintech", "Logistik Maritim", "Biomedis", "Pariwisata Bisnis", "Perdagangan Internasional"],
    },
    "United States": {
        "history": "Amerika Serikat didirikan pada 1776 dan berkembang menjadi kekuatan ekonomi dan teknologi terbesar dunia dengan Silicon Valley sebagai pusat inovasi global.",
        "sectors": ["Teknologi & Software", "Keuangan Wall Street", "Hiburan Hollywood", "Aerospace & Pertahanan", "Farmasi & Biotek", "Energi Terbarukan"],
    },
    "Japan": {
        "history": "Jepang mengalami transformasi dari era samurai menjadi negara industri maju dengan teknologi robotika dan otomotif yang memimpin dunia.",
        "sectors": ["Otomotif Toyota-Honda", "Robotika & AI", "Elektronik & Gaming", "Anime & Manga", "Teknologi Ramah Lingkungan", "Presisi Manufaktur"],
    },
    "China": {
        "history": "Tiongkok dengan peradaban 5000 tahun kini menjadi pabrik dunia dan pemimpin dalam teknologi 5G, e-commerce, dan energi terbarukan.",
        "sectors": ["Manufaktur & Ekspor", "Teknologi 5G", "E-commerce Alibaba", "Energi Solar & Angin", "High-Speed Rail", "Artificial Intelligence"],
    },
    "Germany": {
        "history": "Jerman adalah mesin ekonomi Eropa yang dikenal dengan presisi engineering, teknologi hijau, dan industri 4.0 yang mengintegrasikan IoT dalam manufaktur.",
        "sectors": ["Otomotif Premium", "Energi Terbarukan", "Mesin Presisi", "Industri 4.0", "Teknologi Hijau", "Farmasi & Kimia"],
    },
    "South Korea": {
        "history": "Korea Selatan bangkit dari perang untuk menjadi negara maju dengan gelombang Hallyu (Korean Wave) dan teknologi semikonduktor terdepan.",
        "sectors": ["Semikonduktor Samsung", "K-Pop & Entertainment", "Otomotif Hyundai-Kia", "Teknologi 5G", "Gaming & Esports", "Kosmetik K-Beauty"],
    },
    "India": {
        "history": "India adalah demokrasi terbesar dunia dengan ekonomi yang berkembang pesat, terutama dalam teknologi informasi dan farmasi generik.",
        "sectors": ["IT & Software Services", "Farmasi Generik", "Teknologi Startup", "Film Bollywood", "Tekstil & Garmen", "Space Technology"],
    },
    "Australia": {
        "history": "Australia adalah negara benua dengan ekonomi yang didominasi oleh pertambangan dan agrikultur, serta menjadi gateway Asia-Pasifik.",
        "sectors": ["Pertambangan Bijih Besi", "Agrikultur & Daging Sapi", "Pendidikan Internasional", "Pariwisata", "Energi LNG", "Wine Export"],
    },
    "Brazil": {
        "history": "Brazil adalah raksasa Amerika Latin dengan sumber daya alam melimpah dan industri agrikultur yang memimpin dunia dalam produksi kedelai dan kopi.",
        "sectors": ["Agrikultur Kedelai", "Produksi Kopi", "Pertambangan", "Minyak Bumi", "Otomotif", "Teknologi Fintech"],
    },
    "Canada": {
        "history": "Kanada adalah negara yang kaya akan sumber daya alam dengan ekonomi yang stabil dan menjadi leader dalam teknologi AI dan clean energy.",
        "sectors": ["Energi & Minyak", "Pertambangan Emas", "Teknologi AI", "Kehutanan", "Agrikultur Gandum", "Clean Technology"],
    },
    "United Kingdom": {
        "history": "Inggris adalah negara dengan sejarah maritim yang kuat dan kini menjadi pusat keuangan global London serta leader dalam fintech dan creative industries.",
        "sectors": ["Keuangan London", "Fintech & Banking", "Creative Industries", "Farmasi", "Aerospace", "Pendidikan Tinggi"],
    },
    "France": {
        "history": "Prancis adalah negara dengan warisan budaya yang kaya dan ekonomi yang didominasi oleh luxury goods, aerospace, dan nuclear energy.",
        "sectors": ["Luxury Fashion", "Aerospace Airbus", "Nuclear Energy", "Pariwisata Budaya", "Wine & Champagne", "Automotive"],
    },
    "Netherlands": {
        "history": "Belanda adalah negara maritim dengan ekonomi yang fokus pada logistik, agrikultur modern, dan teknologi berkelanjutan.",
        "sectors": ["Logistik Pelabuhan", "Agrikultur High-Tech", "Energi Angin", "Teknologi Air", "Bunga & Hortikultura", "Teknologi Pangan"],
    },
    "Switzerland": {
        "history": "Swiss adalah negara alpine yang dikenal dengan stabilitas politik, presisi manufaktur, dan sebagai pusat keuangan private banking dunia.",
        "sectors": ["Private Banking", "Farmasi & Biotech", "Luxury Watches", "Precision Manufacturing", "Cokelat Premium", "Insurance"],
    },
    "Sweden": {
        "history": "Swedia adalah negara Nordik yang memimpin dalam inovasi teknologi, keberlanjutan lingkungan, dan model welfare state.",
        "sectors": ["Teknologi Startup", "Clean Energy", "Gaming (Spotify, IKEA)", "Kehutanan Berkelanjutan", "Otomotif Volvo", "Fashion Sustainable"],
    },
    "Norway": {
        "history": "Norwegia adalah negara yang kaya minyak dengan sovereign wealth fund terbesar dunia dan leader dalam teknologi maritim.",
        "sectors": ["Minyak & Gas Bumi", "Teknologi Maritim", "Seafood & Salmon", "Clean Energy", "Shipping", "Teknologi Hijau"],
    },
    "Denmark": {
        "history": "Denmark adalah pioneer dalam energi angin dan dikenal dengan design, teknologi hijau, dan quality of life yang tinggi.",
        "sectors": ["Energi Angin", "Design & Architecture", "Agrikultur Organik", "Farmasi Novo Nordisk", "Shipping Maersk", "CleanTech"],
    },
    "Finland": {
        "history": "Finlandia adalah negara yang unggul dalam teknologi telekomunikasi, pendidikan, dan teknologi game dengan Nokia dan Supercell.",
        "sectors": ["Teknologi Telekom", "Gaming & Mobile", "Kehutanan Berkelanjutan", "CleanTech", "Pendidikan Digital", "Bioeconomy"],
    },
    "Thailand": {
        "history": "Thailand adalah satu-satunya negara Asia Tenggara yang tidak pernah dijajah dan kini menjadi hub manufaktur otomotif di kawasan.",
        "sectors": ["Manufaktur Otomotif", "Pariwisata", "Agrikultur Beras", "Seafood Export", "Elektronik", "Petrochemicals"],
    },
    "Philippines": {
        "history": "Filipina adalah negara kepulauan dengan ekonomi yang berkembang pesat dalam sektor services, terutama BPO dan remittances.",
        "sectors": ["Business Process Outsourcing", "Remittances", "Pertambangan Nikel", "Agrikultur", "Pariwisata", "Semiconductor Assembly"],
    },
    "Vietnam": {
        "history": "Vietnam telah bertransformasi dari ekonomi pertanian menjadi manufaktur hub dengan pertumbuhan ekonomi tercepat di Asia Tenggara.",
        "sectors": ["Manufaktur Elektronik", "Tekstil & Apparel", "Seafood Export", "Kopi Robusta", "Pariwisata", "Teknologi Startup"],
    },
    "South Africa": {
        "history": "Afrika Selatan adalah ekonomi terbesar di Afrika dengan sumber daya mineral yang melimpah dan sektor keuangan yang maju.",
        "sectors": ["Pertambangan Emas", "Platinum & Berlian", "Wine Export", "Otomotif", "Keuangan", "Teknologi Fintech"],
    },
    "Nigeria": {
        "history": "Nigeria adalah raksasa Afrika dengan ekonomi terbesar di benua ini, didominasi oleh minyak bumi dan sektor teknologi yang berkembang pesat.",
        "sectors": ["Minyak Bumi", "Teknologi Fintech", "Film Nollywood", "Agrikultur", "Telekomunikasi", "Banking"],
    },
    "Egypt": {
        "history": "Mesir memiliki peradaban kuno yang terkenal dan kini berkembang dengan ekonomi yang didukung oleh pariwisata, tekstil, dan Terusan Suez.",
        "sectors": ["Pariwisata Sejarah", "Terusan Suez", "Tekstil & Cotton", "Minyak & Gas", "Agrikultur", "Real Estate"],
    },
    "Turkey": {
        "history": "Turki adalah jembatan antara Eropa dan Asia dengan ekonomi yang didukung oleh manufaktur, tekstil, dan pariwisata.",
        "sectors": ["Tekstil & Fashion", "Otomotif", "Steel & Besi", "Tourism", "Construction", "Agrikultur"],
    },
    "Israel": {
        "history": 'Israel dikenal sebagai "Startup Nation" dengan ekosistem teknologi yang sangat maju dan inovasi dalam bidang cybersecurity.',
        "sectors": ["High-Tech & Startup", "Cybersecurity", "Agrikultur Precision", "Farmasi & Biotech", "Defense Technology", "Diamond Cutting"],
    },
    "Saudi Arabia": {
        "history": "Arab Saudi adalah produsen minyak terbesar dunia yang sedang melakukan diversifikasi ekonomi melalui Vision 2030.",
        "sectors": ["Minyak Bumi", "Petrokimia", "Renewable Energy", "Tourism (NEOM)", "Construction", "Financial Services"],
    },
    "United Arab Emirates": {
        "history": "UAE telah bertransformasi dari ekonomi berbasis minyak menjadi hub bisnis dan pariwisata global di Timur Tengah.",
        "sectors": ["Real Estate Dubai", "Tourism & Hospitality", "Financial Services", "Logistics & Trade", "Renewable Energy", "Space Technology"],
    },
    "New Zealand": {
        "history": "Selandia Baru dikenal dengan pemandangan alam yang indah, agrikultur berkelanjutan, dan film industri Lord of the Rings.",
        "sectors": ["Agrikultur Dairy", "Tourism Adventure", "Wine Export", "Film & Creative", "Renewable Energy", "Software"],
    },
}

DEFAULT_HISTORY = {
    "history": "Negara ini memiliki sejarah dan budaya yang unik. Untuk informasi sejarah yang lebih lengkap, silakan konsultasi sumber-sumber sejarah dan ensiklopedia yang terpercaya.",
    "sectors": ["Pertanian", "Industri", "Jasa", "Pariwisata", "Perdagangan"],
}

GOVERNMENT_TYPES: dict[str, str] = {
    # Asia
    "Indonesia": "Republik Presidensial Demokratis",
    "Malaysia": "Monarki Konstitusional Federal",
    "Singapore": "Republik Parlementer",
    "Thailand": "Monarki Konstitusional",
    "Philippines": "Republik Presidensial",
    "Vietnam": "Republik Sosialis Satu Partai",
    "Japan": "Monarki Konstitusional Parlementer",
    "South Korea": "Republik Presidensial",
    "China": "Republik Rakyat Sosialis Satu Partai",
    "India": "Republik Federal Parlementer Demokratis",
    "Pakistan": "Republik Islam Federal Parlementer",
    "Bangladesh": "Republik Parlementer",
    "Myanmar": "Republik Federal",
    "Cambodia": "Monarki Konstitusional",
    "Laos": "Republik Demokratis Rakyat Satu Partai",
    "Nepal": "Republik Federal Demokratis",
    "Sri Lanka": "Republik Presidensial",
    "Maldives": "Republik Presidensial",

    # Amerika
    "United States": "Republik Federal Presidensial Demokratis",
    "Canada": "Monarki Konstitusional Federal Parlementer",
    "Mexico": "Republik Federal Presidensial",
    "Brazil": "Republik Federal Presidensial",
    "Argentina": "Republik Federal Presidensial",
    "Chile": "Republik Presidensial",
    "Colombia": "Republik Presidensial",
    "Peru": "Republik Presidensial",
    "Venezuela": "Republik Federal Presidensial",
    "Ecuador": "Republik Presidensial",
    "Bolivia": "Republik Presidensial",
    "Paraguay": "Republik Presidensial",
    "Uruguay": "Republik Presidensial",
    "Guyana": "Republik Presidensial",
    "Suriname": "Republik Presidensial",

    # Eropa
    "United Kingdom": "Monarki Konstitusional Parlementer",
    "France": "Republik Semi-Presidensial",
    "Germany": "Republik Federal Parlementer",
    "Italy": "Republik Parlementer",
    "Spain": "Monarki Konstitusional Parlementer",
    "Netherlands": "Monarki Konstitusional Parlementer",
    "Belgium": "Monarki Konstitusional Federal Parlementer",
    "Switzerland": "Republik Federal Demokratis",
    "Austria": "Republik Federal Parlementer",
    "Sweden": "Monarki Konstitusional Parlementer",
    "Norway": "Monarki Konstitusional Parlementer",
    "Denmark": "Monarki Konstitusional Parlementer",
    "Finland": "Republik Parlementer",
    "Poland": "Republik Parlementer",
    "Czech Republic": "Republik Parlementer",
    "Hungary": "Republik Parlementer",
    "Portugal": "Republik Semi-Presidensial",
    "Greece": "Republik Parlementer",
    "Russia": "Republik Federal Semi-Presidensial",
    "Ukraine": "Republik Semi-Presidensial",
    "Belarus": "Republik Presidensial",

    # Afrika
    "South Africa": "Republik Parlementer",
    "Nigeria": "Republik Federal Presidensial",
    "Egypt": "Republik Semi-Presidensial",
    "Kenya": "Republik Presidensial",
    "Ethiopia": "Republik Federal Parlementer",
    "Ghana": "Republik Presidensial",
    "Morocco": "Monarki Konstitusional",
    "Algeria": "Republik Semi-Presidensial",
    "Tunisia": "Republik Semi-Presidensial",
    "Libya": "Pemerintahan Transisi",

    # Oseania
    "Australia": "Monarki Konstitusional Federal Parlementer",
    "New Zealand": "Monarki Konstitusional Parlementer",
    "Papua New Guinea": "Monarki Konstitusional Parlementer",
    "Fiji": "Republik Parlementer",

    # Timur Tengah
    "Saudi Arabia": "Monarki Absolut",
    "United Arab Emirates": "Monarki Federal Konstitusional",
    "Qatar": "Monarki Absolut",
    "Kuwait": "Monarki Konstitusional",
    "Bahrain": "Monarki Konstitusional",
    "Oman": "Monarki Absolut",
    "Jordan": "Monarki Konstitusional",
    "Lebanon": "Republik Parlementer",
    "Syria": "Republik Semi-Presidensial",
    "Iraq": "Republik Federal Parlementer",
    "Iran": "Republik Islam Teokratis",
    "Turkey": "Republik Presidensial",
    "Israel": "Republik Parlementer",
}
