"""
quiztower/categories.py

Campaign and recipe category catalogue. Floor topology cycles through this
tuple in order, so the ordering is part of the campaign layout: append new
categories at the end and expect every floor above the old tier boundaries to
shift.
"""

CATEGORIES = (
    # ── Core categories ──
    "History",
    "Science",
    "Literature",
    "Film & TV",
    "Sports",
    "Geography",
    "Arts",
    "Technology",
    "General Knowledge",
    "Music",
    "Food & Drink",
    "Nature & Animals",
    "Mythology",
    "Space & Astronomy",
    "Video Games",
    "Politics & Government",
    "Business & Economics",
    "Health & Medicine",
    "Architecture",
    "Fashion",
    # ── Pop culture & entertainment ──

    "Anime & Manga",
    "Comic Books & Graphic Novels",
    "Broadway & Theater",
    "Podcasts & Radio",
    "Memes & Internet Culture",
    "Reality TV",
    "Stand-Up Comedy",
    "Award Shows & Ceremonies",
    # ── Academic & intellectual ──

    "Philosophy",
    "Psychology",
    "Linguistics & Languages",
    "Anthropology",
    "Sociology",
    "Mathematics",
    "Chemistry",
    "Physics",
    "Biology",
    "Astronomy",
    # ── Regional & cultural ──

    "Asian History & Culture",
    "European History & Culture",
    "Latin American History & Culture",
    "Middle Eastern History & Culture",
    "African History & Culture",
    "Ancient Civilizations",
    "Indigenous Cultures",
    "World Religions",
    # ── Historical eras ──

    "Ancient Rome",
    "Ancient Greece",
    "Medieval Times",
    "Renaissance Era",
    "Age of Exploration",
    "Industrial Revolution",
    "World Wars",
    "Cold War Era",
    "1960s-1970s Culture",
    "1980s Nostalgia",
    "1990s Nostalgia",
    "2000s Pop Culture",
    # ── Professional & specialized ──

    "Law & Legal Systems",
    "Military & Warfare",
    "Aviation & Aerospace",
    "Maritime & Naval History",
    "Engineering & Innovation",
    "Medicine & Healthcare",
    "Education & Academia",
    "Journalism & Media",
    # ── Hobbies & lifestyle ──

    "Cooking & Culinary Arts",
    "Wine & Spirits",
    "Coffee & Tea",
    "Fitness & Exercise",
    "Yoga & Meditation",
    "Board Games & Tabletop",
    "Card Games & Poker",
    "Puzzles & Brain Teasers",
    "Photography",
    "Gardening & Horticulture",
    # ── Sports specific ──

    "Soccer/Football",
    "Basketball",
    "Baseball",
    "American Football",
    "Tennis",
    "Golf",
    "Olympic Sports",
    "Extreme Sports",
    "Combat Sports",
    "Motorsports & Racing",
    # ── Music genres ──

    "Classical Music",
    "Jazz & Blues",
    "Rock & Roll History",
    "Hip Hop & Rap",
    "Country Music",
    "Electronic & Dance Music",
    "Painting & Visual Arts",
    "Sculpture",
    "Street Art & Graffiti",
    # ── Science & nature specific ──

    "Marine Biology & Oceanography",
    "Dinosaurs & Paleontology",
    "Insects & Entomology",
    "Birds & Ornithology",
    "Ecology & Environment",
    "Climate & Weather",
    "Volcanoes & Earthquakes",
    "Genetics & DNA",
    "Neuroscience",
    # ── Technology specific ──

    "Cryptocurrency & Blockchain",
    "Artificial Intelligence",
    "Cybersecurity",
    "Gaming Hardware & Consoles",
    "Internet History",
    # ── Quirky & fun ──

    "Urban Legends & Folklore",
    "Conspiracy Theories",
    "Famous Disasters & Accidents",
    "Unsolved Mysteries",
    "Famous Trials & Court Cases",
    "Hoaxes & Pranks",
    "Inventions & Patents",
    "Superstitions & Traditions",
    "Oddities & Strange Facts",
    # ── Literature specific ──

    "Poetry",
    "Science Fiction",
    "Fantasy Literature",
    "Mystery & Detective Fiction",
    "Horror & Gothic Literature",
    "Romance Novels",
    "Children's Literature",
    "Shakespeare",
    # ── Geography specific ──

    "World Capitals",
    "Mountains & Peaks",
    "Rivers & Lakes",
    "Deserts & Biomes",
    "Islands & Archipelagos",
    "US Geography",
    "European Geography",
    "Flags & Symbols",
    # ── Food & drink specific ──

    "Baking & Pastries",
    "International Cuisine",
    "Fast Food & Chains",
    "Cocktails & Mixology",
    "Craft Beer & Brewing",
    "Candy & Sweets",
    # ── Miscellaneous ──

    "Toys & Collectibles",
    "Brands & Logos",
    "Holidays & Celebrations",
    "Weddings & Traditions",
    "Etiquette & Manners",
    "Crime & Criminology",
    "Pirates & Privateers",
    "Royalty & Nobility",
    "Animals & Pets",
    "Plants & Flowers",
    "Cartoons & Animation",
    # ── Specific mythologies ──

    "Greek Mythology",
    "Roman Mythology",
    "Norse Mythology",
    "Egyptian Mythology",
    # ── Film & TV franchises ──

    "Star Wars Universe",
    "Star Trek Universe",
    "Marvel Cinematic Universe",
    "DC Comics Adaptations",
    "James Bond Films",
    "Indiana Jones Series",
    "Jurassic Park Franchise",
    "The Matrix Trilogy",
    "Breaking Bad",
    "The Sopranos",
    "The Wire",
    "Friends",
    "Seinfeld",
    "The Office",
    "Doctor Who",
    "Stranger Things",
    "The Simpsons",
    "South Park",
    "Rick and Morty",
    "Black Mirror",
    "Parks and Recreation",
    "Arrested Development",
    # ── Literary works & authors ──

    "Lord of the Rings",
    "Harry Potter Series",
    "Game of Thrones",
    "The Chronicles of Narnia",
    "Dune",
    "Sherlock Holmes Stories",
    "Agatha Christie Novels",
    "Stephen King Works",
    "H.P. Lovecraft & Cthulhu Mythos",
    "Jane Austen Novels",
    "Charles Dickens Works",
    "Ernest Hemingway",
    "F. Scott Fitzgerald",
    "1984 & George Orwell",
    "Brave New World",
    "To Kill a Mockingbird",
    "The Great Gatsby",
    "Moby Dick",
    "Pride and Prejudice",
    "War and Peace",
    "The Odyssey & Homer",
    "The Divine Comedy",
    "Don Quixote",
    "Crime and Punishment",
    "The Catcher in the Rye",
    # ── Musical artists & bands ──

    "The Beatles",
    "The Rolling Stones",
    "Led Zeppelin",
    "Pink Floyd",
    "Queen",
    "David Bowie",
    "Bob Dylan",
    "Michael Jackson",
    "Madonna",
    "Prince",
    "Nirvana",
    "Radiohead",
    "Kanye West",
    "Beyoncé",
    "Taylor Swift",
    "The Grateful Dead",
    "Wu-Tang Clan",
    "Daft Punk",
    "Metallica",
    "AC/DC",
    # ── Video game franchises ──

    "Super Mario Series",
    "The Legend of Zelda",
    "Pokémon Games",
    "Final Fantasy Series",
    "The Elder Scrolls",
    "Fallout Series",
    "Grand Theft Auto",
    "Call of Duty",
    "Halo Series",
    "Dark Souls & Souls-like Games",
    "Minecraft",
    "Fortnite",
    "League of Legends",
    "World of Warcraft",
    "The Witcher Games",
    "Red Dead Redemption",
    "Metal Gear Solid",
    "Resident Evil",
    "God of War",
    "Assassin's Creed",
    # ── Historical events ──

    "The Apollo Moon Missions",
    "Fall of the Berlin Wall",
    "The French Revolution",
    "American Civil War",
    "Manhattan Project",
    "Great Depression Economics",
    "Cuban Missile Crisis",
    "Watergate Scandal",
    "Chernobyl Disaster",
    "COVID-19 Pandemic",
    "D-Day & Normandy Invasion",
    "Battle of Stalingrad",
    "American Revolutionary War",
    "Napoleonic Wars",
    "Vietnam War",
    # ── Regional cuisines ──

    "Japanese Cuisine & Sushi",
    "Italian Regional Dishes",
    "French Haute Cuisine",
    "Thai Street Food",
    "Indian Curries & Spices",
    "Mexican Authentic Cuisine",
    "Chinese Regional Cooking",
    "Korean BBQ & Banchan",
    "Vietnamese Pho & Street Food",
    "Spanish Tapas & Paella",
    "Greek Mediterranean Food",
    "Turkish Kebabs & Mezes",
    "Lebanese Middle Eastern",
    "Ethiopian Cuisine",
    "Peruvian Ceviche & Dishes",
    # ── Architectural landmarks ──

    "Gothic Architecture",
    "Art Nouveau & Art Deco",
    "Frank Lloyd Wright",
    "The Eiffel Tower",
    "The Taj Mahal",
    "The Great Wall of China",
    "Machu Picchu",
    "The Colosseum",
    "Petra Jordan",
    "Angkor Wat",
    "Sagrada Familia",
    "Burj Khalifa",
    "Sydney Opera House",
    "The Pyramids of Giza",
    "Stonehenge",
    # ── Scientific figures ──

    "Albert Einstein",
    "Isaac Newton",
    "Marie Curie",
    "Charles Darwin",
    "Nikola Tesla",
    "Stephen Hawking",
    "Richard Feynman",
    "Carl Sagan",
    "Alan Turing",
    "Ada Lovelace",
    "Galileo Galilei",
    "Leonardo da Vinci",
    "Rosalind Franklin",
    "Jane Goodall",
    "Neil deGrasse Tyson",
    # ── Artists & art movements ──

    "Vincent van Gogh",
    "Pablo Picasso",
    "Salvador Dalí",
    "Andy Warhol",
    "Banksy",
    "Michelangelo",
    "Rembrandt",
    "Claude Monet",
    "Impressionism",
    "Surrealism",
    "Cubism",
    "Renaissance Art",
    "Baroque Art",
    "Pop Art",
    "Abstract Expressionism",
    # ── Sports figures ──

    "Michael Jordan",
    "Muhammad Ali",
    "Babe Ruth",
    "Tom Brady",
    "Lionel Messi",
    "Cristiano Ronaldo",
    "Serena Williams",
    "Tiger Woods",
    "Usain Bolt",
    "Michael Phelps",
    "Wayne Gretzky",
    "Pelé",
    "LeBron James",
    "Kobe Bryant",
    "Roger Federer",
    # ── Mythical creatures & folklore ──

    "Dragons in World Mythology",
    "Vampires & Vampire Lore",
    "Werewolves & Lycanthropy",
    "Zombies in Pop Culture",
    "Fairies & Fae Folk",
    "Mermaids & Sea Mythology",
    "Japanese Yokai",
    "Celtic Mythology",
    "Slavic Folklore",
    "Native American Legends",
    "African Folklore",
    "Aztec & Mayan Mythology",
    # ── Tech companies & products ──

    "Apple Inc. History",
    "Microsoft & Windows",
    "Google & Search",
    "Amazon & E-Commerce",
    "Tesla & Electric Vehicles",
    "SpaceX & Mars Missions",
    "Social Media Platforms",
    "Netflix & Streaming Wars",
    "iPhone Evolution",
    "PlayStation History",
    "Xbox Gaming",
    "Nintendo History",
    # ── Psychological phenomena ──

    "Cognitive Biases",
    "Optical Illusions",
    "Memory & Mnemonics",
    "Dreams & Dream Analysis",
    "Phobias & Fears",
    "Personality Types & MBTI",
    "The Placebo Effect",
    "Confirmation Bias",
    "Game Theory",
    "Body Language & Communication",
    # ── Extreme geography ──

    "Mount Everest Expeditions",
    "Mariana Trench",
    "Amazon Rainforest",
    "Sahara Desert",
    "Antarctica Exploration",
    "The Arctic & North Pole",
    "Grand Canyon",
    "Great Barrier Reef",
    "Galápagos Islands",
    "Iceland's Volcanic Landscape",
    "Norwegian Fjords",
    "New Zealand Geography",
    # ── Military history specifics ──

    "Samurai & Feudal Japan",
    "Alexander the Great",
    "Mongol Empire",
    "Crusades & Holy Wars",
    "World War I Battles",
    "Pacific Theater WWII",
    "European Theater WWII",
    "Special Forces & Elite Units",
    "Medieval Siege Warfare",
    "Ancient Military Tactics",
    # ── Miscellaneous fun ──

    "Guinness World Records",
    "Espionage & Spies",
    "Haunted Places & Ghost Stories",
    "Amusement Parks & Theme Parks",
    "Magic & Illusions",
    "Advertising & Marketing",
    "Circus & Carnival History",
    "Treasure Hunts & Lost Artifacts",
    "Famous Heists",
    "Cults & Secret Societies",
    "Titanic History",
    "Las Vegas History",
    "Hollywood History",
    "British Royal Family",
    "Presidential History",
    # ── Musical instruments ──

    "Piano & Keyboard History",
    "Guitar Types & Techniques",
    "Violin & String Instruments",
    "Drums & Percussion",
    "Synthesizers & Electronic Music",
    "Brass Instruments",
    "Woodwind Instruments",
    "Traditional World Instruments",
    # ── Fashion & style ──

    "Coco Chanel",
    "Fashion Through the Decades",
    "Streetwear Culture",
    "Luxury Fashion Houses",
    "Sneaker Culture",
    "Fashion Week & Runway",
    "Vintage & Retro Fashion",
    "Sustainable Fashion",
    # ── Drink & beverage ──

    "Whiskey & Bourbon",
    "Wine Regions & Varietals",
    "Coffee Origins & Brewing",
    "Tea Traditions",
    "Champagne & Sparkling Wine",
    "Tequila & Mezcal",
    # ── Space & astronomy specific ──

    "Black Holes & Cosmic Phenomena",
    "Mars Exploration",
    "The Solar System",
    "Famous Astronomers",
    "Space Shuttle Program",
    "International Space Station",
    "Exoplanets & Alien Worlds",
    "Constellations & Star Maps",
    # ── Animals specific ──

    "Dogs & Dog Breeds",
    "Cats & Cat Breeds",
    "Sharks & Ocean Predators",
    "Big Cats & Wild Felines",
    "Primates & Apes",
    "Endangered Species",
    "Venomous Animals",
    "Prehistoric Animals",
    # ── Cars & vehicles ──

    "Classic Cars",
    "Formula 1 Racing",
    "Muscle Cars",
    "Motorcycles",
    "Luxury Automobiles",
    "Electric Vehicles",
    # ── True crime & mystery ──

    "Serial Killers",
    "Cold Cases",
    "True Crime Documentaries",
    "Famous Criminals",
    "Prison History",
    "Forensic Science",
    # ── Additional categories ──

    "Disney Movies & Characters",
    "Pixar Films",
    "Studio Ghibli",
    "DreamWorks Animation",
    "WWE & Professional Wrestling",
    "UFC & MMA",
    "Boxing History",
    "Chess",
    "Poker & Card Games",
    "Broadway Musicals",
    "Opera",
    "Ballet & Dance",
    "Sculpture & 3D Art",
    "Graffiti & Urban Art",
    "Digital Art & NFTs",
    "Interior Design",
    "Landscaping & Gardens",
    "Trains & Railways",
    "Ships & Sailing",
    "Submarines & Deep Sea",
    "Helicopters & Rotorcraft",
    "Drones & UAVs",
    "Robotics",
    "3D Printing",
    "Virtual Reality",
    "Augmented Reality",
    "Podcasting History",
    "YouTube & Content Creators",
    "TikTok & Short Form Video",
    "Twitch & Livestreaming",
    "Esports",
    "Speedrunning",
    "Retro Gaming",
    "Mobile Gaming",
    "Indie Games",
    "Game Development",
    "Animation History",
    "Voice Acting",
    "Film Directors",
    "Screenwriting",
    "Cinematography",
    "Film Scores & Soundtracks",
    "Horror Films",
    "Comedy Films",
    "Action Movies",
    "Romantic Comedies",
    "Documentaries",
    "Foreign Films",
    "Silent Film Era",
    "Golden Age of Hollywood",
    "New Hollywood Era",
    "Blockbuster Era",
)

CATEGORY_COUNT = len(CATEGORIES)
