"""
Built-in word pairs used when no custom list is configured.
"""

from typing import List, Tuple

DEFAULT_WORD_PAIRS: List[Tuple[str, str]] = [
    ("Coffee", "Tea"),
    ("Pancake", "Waffle"),
    ("Sushi", "Rice"),
    ("Butter", "Margarine"),
    ("Soup", "Stew"),
    ("Burger", "Sandwich"),
    ("Biscuit", "Cookie"),
    ("Jam", "Jelly"),
    ("Yogurt", "Ice Cream"),
    ("Wine", "Champagne"),
    ("Tofu", "Cheese"),
    ("Rice", "Quinoa"),
    ("Tortilla", "Bread"),
    ("Muffin", "Cupcake"),
    ("Tomato", "Apple"),
    ("Onion", "Garlic"),
    ("Salt", "Sugar"),
    ("Honey", "Sugar"),
    ("Water", "Vodka"),
    ("Milk", "Soy Milk"),
    ("Date", "Fig"),
    ("Kiwi", "Avocado"),
    ("Curry", "Chili"),
    ("Cabbage", "Lettuce"),
    ("Fries", "Chips"),
    ("Ketchup", "Mustard"),
    ("Bee", "Wasp"),
    ("Dinosaur", "Lizard"),
    ("Unicorn", "Horse"),
    ("Frog", "Toad"),
    ("Wolf", "Dog"),
    ("Lion", "Tiger"),
    ("Penguin", "Puffin"),
    ("Shark", "Dolphin"),
    ("Eagle", "Falcon"),
    ("Butterfly", "Moth"),
    ("Spider", "Scorpion"),
    ("Crocodile", "Alligator"),
    ("Duck", "Swan"),
    ("Horse", "Donkey"),
    ("Whale", "Orca"),
    ("Mushroom", "Moss"),
    ("Tree", "Bush"),
    ("Sun", "Star"),
    ("Sea", "Lake"),
    ("Rain", "Hail"),
    ("Tornado", "Hurricane"),
    ("Copper", "Bronze"),
    ("Ruby", "Ring"),
    ("Bat", "Rat"),
    ("Seal", "Walrus"),
    ("Crane", "Stork"),
    ("Desert", "Camel"),
    ("Savannah", "Safari"),
    ("Mountain", "Volcano"),
    ("Seagull", "Tide"),
    ("Cave", "Tunnel"),
    ("Island", "Peninsula"),
    ("Glacier", "Iceberg"),
    ("Stream", "River"),
    ("Wood", "Timber"),
    ("Pen", "Pencil"),
    ("Soap", "Shampoo"),
    ("Towel", "Napkin"),
    ("Fork", "Spoon"),
    ("Sofa", "Chair"),
    ("Sofa", "Stool"),
    ("Pillow", "Bed"),
    ("Blanket", "Bed"),
    ("Glass", "Cup"),
    ("Umbrella", "Raincoat"),
    ("Glasses", "Contact Lenses"),
    ("Watch", "Bracelet"),
    ("Ring", "Earring"),
    ("Hoodie", "Jacket"),
    ("Shoe", "Boot"),
    ("Glove", "Mitten"),
    ("Suitcase", "Backpack"),
    ("Laptop", "Tablet"),
    ("Headphones", "Earbuds"),
    ("Fan", "Air Conditioner"),
    ("Oven", "Microwave"),
    ("Broom", "Mop"),
    ("Candle", "Flashlight"),
    ("Suit", "Tie"),
    ("Deck", "Patio"),
    ("Check", "Receipt"),
    ("Drill", "Saw"),
    ("Cast", "Mold"),
    ("Bolt", "Screw"),
    ("File", "Folder"),
    ("Press", "Iron"),
    ("Cabinet", "Drawer"),
    ("Rope", "String"),
    ("Helmet", "Cap"),
    ("Chain", "Cuff"),
    ("Frame", "Border"),
    ("Shutter", "Blind"),
    ("Key", "Code"),
    ("Pad", "Mat"),
    ("Screen", "Monitor"),
    ("Stapler", "Puncher"),
    ("Cinema", "Theater"),
    ("Library", "Bookstore"),
    ("Prison", "Zoo"),
    ("Hotel", "Hospital"),
    ("School", "University"),
    ("Museum", "Gallery"),
    ("Bakery", "Cafe"),
    ("Gym", "Bench"),
    ("Church", "Priest"),
    ("Elevator", "Escalator"),
    ("Pool", "Beach"),
    ("Bar", "Pub"),
    ("City", "Village"),
    ("Street", "Road"),
    ("Lighthouse", "Beacon"),
    ("Office", "Garage"),
    ("Wall", "Fence"),
    ("Manure", "Farm"),
    ("Garden", "Farm"),
    ("Garden", "Park"),
    ("Batman", "Superman"),
    ("Dumbledore", "Gandalf"),
    ("Star Wars", "Star Trek"),
    ("Mario", "Luigi"),
    ("Vampire", "Werewolf"),
    ("Zombie", "Ghost"),
    ("Santa Claus", "Jesus"),
    ("Sherlock Holmes", "James Bond"),
    ("Tintin", "Asterix"),
    ("Pokemon", "Digimon"),
    ("Facebook", "Instagram"),
    ("Youtube", "TikTok"),
    ("Android", "iPhone"),
    ("Angel", "Fairy"),
    ("Cyclops", "Giant"),
    ("Pirate", "Viking"),
    ("King", "Throne"),
    ("Love", "Lust"),
    ("Smart", "Cunning"),
    ("Salary", "Wealth"),
    ("Holiday", "Vacation"),
    ("Medicine", "Science"),
    ("History", "Legend"),
    ("Music", "Noise"),
    ("Painting", "Photo"),
    ("Gift", "Bribe"),
    ("Secret", "Lie"),
    ("Bank", "Shore"),
    ("Tear", "Rip"),
    ("Tie", "Knot"),
    ("Strike", "Protest"),
    ("Spring", "Morning"),
    ("Night", "Winter"),
    ("Knight", "Sword"),
    ("Punch", "Slap"),
    ("Match", "Lighter"),
    ("Newspaper", "Book"),
    ("Lawyer", "Judge"),
    ("Discount", "Receipt"),
    ("Ticket", "Bus"),
    ("Spike", "Thorn"),
    ("Cap", "Lid"),
    ("Light", "Feather"),
    ("Heavy", "Dense"),
    ("Sharp", "Pointy"),
    ("Smooth", "Slick"),
    ("Car", "Van"),
    ("Hotel", "Resort"),
    ("Beach", "Sand"),
    ("Ship", "Boat"),
    ("Boat", "Raft"),
    ("Train", "Metro"),
    ("Clock", "Schedule"),
]
