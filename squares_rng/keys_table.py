"""Built-in table of 8192 pre-selected Squares keys.

Every key has sixteen non-zero hex digits, the eight digits in each 32-bit
half are pairwise distinct, and the key is odd. Entry 0 is the reference key
used by the known-answer tests. Generated offline; never modified at runtime.
"""

KEYS = (
    0x2467cb532b5ce8d1, 0x4a5fb16e4936f5a7, 0xc7394f213fb4c597, 0xedbf8c327b3dc295,
    0xbf52416c4a5fce91, 0xa1bdc95739c2568b, 0xdf84617bf271563d, 0x3e98a2f7c478df51,
    0xc54fb67abc456da3, 0x8d3fcbe1c1f5432b, 0xbd82c967287fcd6b, 0xbd4921c8ac6435df,
    0xc18e967549e1af65, 0x4db59e6abaf84d27, 0x78cd29142615f3c7, 0xc85ae3219e83ab57,
    0x7b5acdfe6e5bca17, 0xc329a6ebe4c59261, 0xe96f21cb8a7d1c25, 0x7ecd42a582cb3167,
    0x814b2afc12acd8e9, 0xed824ca3c326df87, 0x36f1cb8a7c2ad59b, 0xa6df7e59a42f395b,
    0xf341b6e54d98bc2f, 0x974a6f51c1a392e5, 0xdef9413c72edfb63, 0x726f4d53154ac6b7,
    0x7628ea41574a18f9, 0x9e368af569e4b7cf, 0xf87ea6438e91d635, 0xec7b58f16dc8e3bf,
    0x6123fba78be143f9, 0x4cd712f6e8c3965f, 0xd71b94ef34b86275, 0xb2c3761962ca48d7,
    0x8f657e2a49f12c3b, 0x84d169aef6d78e15, 0xe1c7db36a217c8db, 0xb3645d275ab82cfd,
    0xe8341b7abc5139d7, 0x9ca41b86e9d2618b, 0xfe185b6c7ec5d123, 0xe547bd895826cadb,
    0xb7df14353fc17ba5, 0xdb162c3e234cab19, 0x64dc7afe357b1649, 0x1a4e7592e892a7b1,
    0x6852dea951a2ce79, 0x192de3cb259e7d3f, 0x9adf4e78a24d6137, 0x35c2b7497eb2d193,
    0xa2d14cb7e1afc34d, 0xb63c7f127be259d3, 0xf3b1dc97b863d9cf, 0x48a6e35d142de59f,
    0x231e75bd7e83df19, 0xad963c1ef156dab9, 0xd7c53b9fb2c65a13, 0x2be354d923fc9db1,
    0xc14ed578f91ab3d5, 0xcd798eb561f5427b, 0x5728bc6fe5df1483, 0xe134afc6cfa56197,
    0xd9e462facd346189, 0x4c875fb3b69ec187, 0x59fd8e7c1ceb5897, 0x1683e7cd346e1b7f,
    0x346758fe927f4de3, 0x7f5b6e3138bf91cd, 0x8cb9623481e9543f, 0xd3429e1a6b278e3f,
    0xb4a71fecec7a1f45, 0xfc67391487e46caf, 0xcb6d1fa785d3b7c9, 0x5b92ac48417ab2f5,
    0xb5427f819f81a423, 0xa67d5f34f7a69cb1, 0xfe9b23a5a429d5c3, 0xf391245e1329bcad,
    0x593a2c6feba6925d, 0x89ca7f4d8efcd329, 0x67da3fce861cdf75, 0x16e32bc952e43789,
    0xc82e1d4363241a5b, 0xf86ba539d9254a8b, 0x5b6712af4e75c1ad, 0x45b7f362a1e9fc83,
    0xebc21a984ae1b6c7, 0xa4398ef27625b913, 0x4975a31e7e3154af, 0x964b5a8f84b5fde9,
    0x2b6c843ae879254f, 0x78624f35be42afd5, 0x82a14cd719cb7e2f, 0x576243ecd1248e63,
    0xb74fa2951564daef, 0x26c9a74b25f7e9d1, 0xc73849df26cf4375, 0x24659ad397352b1f,
    0xf9724ae1a86f7321, 0x35b4de87614d973b, 0x1e37b8a582d74a5f, 0xeabc5932a6bd2857,
    0xd7ec1f36f43ca851, 0xa72b8415ab13fe87, 0xf2abec78a365bf41, 0xf2c1b6587cf3846d,
    0xe198ad6cde4c6f35, 0x3ad8e7c658b1c3e7, 0x7241368b147ed265, 0x39a62148eabd6f39,
    0xbf3eac6792c3a4df, 0x5e71d6f8b9364c7d, 0x93e1c245cab7418f, 0x8eab14c7e4a98dbf,
    0xf5ed1793cb541723, 0x789a1fd351e6fa2d, 0x5c6da429ab49ed25, 0x64afe75985297d4b,
    0x1c5edb686eda41c7, 0x38f26915be5d8c13, 0x95b734164167ae83, 0xb36ef2847dbc5863,
    0xc876e9a1c3a69e71, 0x9baf6745cd17b26f, 0xf179aed4cf623e71, 0x56adb9c4c287a5fb,
    0x3fdec716f3c68d15, 0x64d7b83fd5a326eb, 0x4b7c2d83653e978d, 0xeab6d75f235e46f9,
    0x92147e35dbc481e9, 0x96d2a7f532fe5b6d, 0xe83f54ac8347adcb, 0x259f463ed3ae4895,
    0xe9bf85d753fbca19, 0x863754dca9e45c2f, 0x9483ae1c35b7e92f, 0xb35d76f96a4d2f75,
    0xf1976de8fd2cea67, 0x7e2ac4b67ca8db51, 0x3e4df1a947a6cfd1, 0xc9dba723fde62c35,
    0x34febc9ac7e6ba83, 0xa5ec18fdba814c7f, 0xe62b54ac849a3b57, 0xe9adc7138e1c3a6f,
    0x4cfb7ad5c4627e9d, 0x2f769ea8df2a5ceb, 0x31e92db8413bc289, 0x2a6bf791c4d3eb1f,
    0x92f7bc13eb1d3859, 0x92cb7dfed65eb249, 0x3579afeca2764d51, 0x83f196da51293d67,
    0x9d68afe5953f84cb, 0x85a7139f1def5b47, 0x6acd3f986a8d93c1, 0x519c7a68e14f7365,
    0x62d7efc4ea1cf72b, 0xcf714689acb492d7, 0x89b127df86ced7a3, 0x6432cf7bdb198ca3,
    0xb53edc891a285db9, 0xb9e7146ab86a7e19, 0xa1c7f5642b89d4a7, 0xa8bd5e693261bce5,
    0x4dfc2b76c86e1459, 0xe97f861cea4c9b25, 0x31eb24c8539da7f1, 0xadc173f2fc3ab52d,
    0xde7f2b58a6c3f957, 0xf3b2da98be36529d, 0x915b27d47482ab5d, 0x38bde4cf289ebf73,
    0x52d1347e9ce2831f, 0xfd7c4913c469385f, 0x42f7b6d917ab86e9, 0x51c46ebda9e6f24d,
    0x17fabe65e29d8a4b, 0x128b976313e7b6cd, 0x52b739a6a7615e8d, 0x7e6ca2f359c8f14b,
    0xcb234f7ab8a621ed, 0xe84d7b3ceb4768ad, 0x7cf31bd893b4c257, 0x79c524368dc5612f,
    0x2ef1439a318a65f7, 0x75b2a8d92a975461, 0x78cf6a92647e915f, 0xd63f1978e2fac5db,
    0xf358dab934fd6a7b, 0xce8725b61fa6dc4b, 0xa8d627b15cf6b437, 0x9b4fac582d714bc9,
    0x9a31ebfcf2e65741, 0x296abf83fa7d298b, 0x29d7eb3cb5c89643, 0x9e8d7c4a965e2a8d,
    0x7a5ef29376125a39, 0xefc821dac62fed71, 0x2d4839cec68e52f3, 0xd7b63e2c5dac2961,
    0x5ce7f28b1d692475, 0xf51da64872a36ecf, 0xc817fed3a269df47, 0xd9fa7c2e78d94ea5,
    0x2647d1ca863d2c71, 0x9fdc36ba1ecab4f9, 0x527cba46bd4872af, 0xd65cb9a23276efd9,
    0x6f3a8492a2f96d81, 0xe37f6d48368bd94f, 0xe5b834c7ea2f7b83, 0x4ae6d97b41d75e9b,
    0x1e9a26fb2f3b68a1, 0x71e4956ce2361a79, 0x5d932e7f3c814e27, 0x6732abe464e3cd5f,
    0x8f69dbecabd64127, 0x3be624c7b746a8d3, 0x68a2913b674f2ce5, 0x6134cefa78ac26ed,
    0x13defc68372e8641, 0x91b4daf2b8dcf647, 0xb46e8a7274895c2f, 0x248693ed1978f6ed,
    0x6978b1ec8143ab95, 0xe14273fa6d28fc17, 0xf3842d15b65a941f, 0xb1ac9e868426fb17,
    0xfe913b27578a4ce3, 0xc681bd97ef9d816b, 0x879b4152fb46c275, 0x9c2a41ed5a4b2831,
    0x6c41ea8959fe4b21, 0x3ae87c4f7cda5f39, 0x2dbc1e6413c654b9, 0xcb93a5169aced635,
    0x91a2b5f6b53ad971, 0x43b92d5719a873fd, 0x5b1f2a49e372549f, 0xa1835ceb6abe1493,
    0x482af931fe963da5, 0xd8596ea185b3cd71, 0x7f56cb9e34efc219, 0x1eacb238b1a5f8d3,
    0x6be72189a86b47fd, 0xcef98736c14723b5, 0xa65e8d1b847ac5f9, 0xb294dfac371f4d85,
    0x2b31ef684e281ba5, 0x1d82a46be4b31f6d, 0xa7de31c93ce64a1b, 0xd95e671a94ef8ba3,
    0x31e894cd6457ca1f, 0x3928e45a2fde8571, 0x76fbedca68dcb14f, 0xbe8ac4dfc5f3e42d,
    0x654c9f7292ec3b87, 0x3b2498f61d76a8f9, 0xd14c6258eafc295b, 0xac2b67fe45682b1f,
    0x2e3fb75de1a3bf57, 0xa5ec2b3f1c2a4e8b, 0x176edc42a542bd37, 0xa2e79f56c942fa6b,
    0x3c4a6dfe7486ad59, 0x1fd364c296cfb45d, 0x1fbe97489f64abed, 0x53e2bfad35a8cbdf,
    0xf734ed9c3f9aed1b, 0xeac274bd514f9d27, 0x478e2f36ad6fb489, 0x243ebf9cb8597a2f,
    0x6734b9ac3654da8f, 0x1f8b74a6befa4921, 0x21596fe7c5d6fab7, 0x27b4e31f14a5cd3f,
    0x47ca1be91c5f9ae7, 0x5197b62e8de2f6b3, 0x491c2fd6a6f1ce25, 0x91f3e82436874ca1,
    0xad15e7f918edca6b, 0xde1845a6d3a1495f, 0x8c592b6f9c48ba31, 0x39468dcae7562b1f,
    0xc5db73a258a796cb, 0x6f73dbc2fa4ec78d, 0x7b34a5f2ade2f681, 0x8fd26b19c7ef361d,
    0xbc45896fb2f78d53, 0xf2da5673f4e1cdb7, 0x49f2a68bfd187369, 0xdf1ba738d812be7f,
    0x3d41876b2d7f6481, 0x3f2461ceb6c42d97, 0x3584dbe74dc15bf7, 0x173bfe68f48b52d1,
    0x4719ac2f84f37de9, 0xd73c1e243efc7b15, 0xfe17cd8ab6e19735, 0x54eb7af1c8b4519d,
    0x2c417a5fe9d5c6b1, 0x5691b8cea983d461, 0x64823a193f54bc91, 0x319ef7cd7a95243f,
    0xbaef769c39e1acdb, 0xe1cf436257e64fad, 0xa3682d7b74a9dfb1, 0x9f72b18d75182349,
    0xc9a5fb175b7cd689, 0xf3ea146ce5b3c987, 0x67debf8a4d82abf5, 0xc92871e5341eb8ad,
    0xfa189426fe8234d9, 0x479e2da313b268f7, 0x2564efb78653bc4f, 0xf1a62b489a48e15b,
    0x5e426b1a17e8d2b5, 0x8a7ce241af37659b, 0xb41ec837bd324ce5, 0x1a8dc4e987a26b5d,
    0x47a2e9f8f81ea2c3, 0x2f6ca93e59cab643, 0x9a7e8315ec9172a3, 0x91eb2753e4879da3,
    0xd468ac5e64fae52d, 0x9db3f6aeae9783b1, 0x7c5368428b2d7145, 0xf8a5374d9678df4b,
    0x4dc86e37183624e7, 0x85fdbc2a3b4e7fc9, 0xaec8591741c962e7, 0xc76fa312385d12b7,
    0xb91a2edc58d137af, 0x97fe5c182a7946f3, 0xc34d68e93bed6a7f, 0x6b42cefaea4826fd,
    0x4af82569a6ed78f1, 0x5c293fe7c3e6f871, 0xa8ced93f1d895eaf, 0xb834cf19af4c739d,
    0xa136e45b843bcf95, 0xa43ec91f1a3652c7, 0xe95b12fa3edf489b, 0xe28bd9579acb8253,
    0xd6342b5a28a73cf5, 0x4d7ec382134dcb25, 0xa2798453c4825a6f, 0xa5b91e847c4283df,
    0xbac54873d7851b2f, 0xedf894639bf624e1, 0x143d85b9f31672cd, 0xa4286ecbe6b7c54d,
    0xd49b362f34d6a751, 0x15826e9fe1cf58a7, 0xf4d19e25913ce86b, 0xc125fd868bf29e37,
    0x527cb634a6edb485, 0x42b961f37ea8fc93, 0xc238d1fa84a2dbe5, 0x2ca4b873cd14e735,
    0xcd958e63248be579, 0x6b789aefe2f79c1d, 0x9ce83ab1ab3846d7, 0x86cabdf12ec1a547,
    0x5ef137ab68adcb71, 0x6e9f137a968e3a7d, 0xc1796d5acfb73865, 0x784ef9152ac8f647,
    0x28fa3b61982316a5, 0x9a643db5c3f1d827, 0x67ed3c9f37df5ca1, 0x9fce7351864a7213,
    0x8a7b634e6947b3df, 0x9cd867f135c89b27, 0x2d5671f9162ea8d3, 0xfd63158736e87a59,
    0x6845eadc9de2c165, 0xb3da1ec41f74eb53, 0xb613d2984c6b91d5, 0x1564ae286a7e8fb3,
    0x2ca849132ace4f87, 0xae4528b1f2b8d935, 0x17fc649a49deafb1, 0x216a39fd4be2a861,
    0xa69f547e2bf9d785, 0x5d4319abc7e5d8af, 0x2f71ec63619c352d, 0x9d23b85efc2e879d,
    0x58f6de3a28137bc9, 0xba67f2957862fb31, 0x2eb17f85e7a19653, 0x8f167b39c61ea78b,
    0xb5493f86bfa97821, 0x574239fa13ebd72f, 0xf26c845d534b2acd, 0x765d23f92acf69eb,
    0x6d5438aeac4328f9, 0x73a1f452716f523d, 0x7e1db8596b2f85e9, 0x1d582a4c1fc46539,
    0x8eb5c14db975fd61, 0xf18c4b39d7269e51, 0xc28376f1e465c2d3, 0xa5b61d9cb43d12e9,
    0x598e34b26f8c2d71, 0x86e1cf3b4e19cf25, 0xebdf79c652d78931, 0xc679bd35d8326f4b,
    0x46c79d8578fa3291, 0x5e318f6ae1adcf37, 0x83d19eca7c6e451d, 0x954a3b126b2415df,
    0x742fdac9df82e93b, 0x758bca1fbd135cf9, 0x54e68731ef85a1d7, 0x7d648e315c92a3fd,
    0x9361b57fca6e21f3, 0x97a3c4e5fa452ce7, 0xb862e9d17a45c9b1, 0x986a4271563d42fb,
    0x8dfc54b3efd129ab, 0x6c7def386ac43f29, 0x657e18ac2ae4fc65, 0xe5da1cf9cf5d7e4b,
    0x4f1b3e72a7f8d6cb, 0xdfa1be3c341dc26f, 0xe6359db8ed7936b1, 0x7452a6d9a57c92e3,
    0x5f6bcea4218b6fd3, 0xb18f94327fda3915, 0x58d6b3ca6b81ac39, 0x847f6cdea53d72cb,
    0x82ac7edfdef53917, 0xc96d375b294e3a81, 0x92c5a1d6b16a2357, 0x15872da6c9a61b8d,
    0xd15ac843c57edf31, 0x5cb71fd42a846351, 0xd27c46851d958a27, 0x46e3fb52497dec25,
    0x427b831e6cfbe837, 0xe37296cf6ae15749, 0x1a768b545c72e8f9, 0x12bc83464ef69acb,
    0x21af6c545aec7f69, 0x9e18b3c62ec39fbd, 0xc6e874ad8ca62e17, 0x19d7325f3472c5a9,
    0x18ac2bf9a43698b5, 0x1a539d6ca5dec91f, 0x2d145e9ca53c921d, 0xf1c3e2b7d3bae461,
    0x1e93a4cb156b9d47, 0x247c5f3bad1cf537, 0x69ca375b831e6da7, 0x6d9c123f9e5fcad7,
    0x2bf47631d2a789b1, 0xc5984b2af7628143, 0x29ce4d7fa5692cbd, 0x3e459f1864cd9231,
    0x29865a7b197ef63b, 0x5f4eb3c842f7d359, 0xe598dcbfa8fc2413, 0xfc97b486962a753b,
    0x1764df23fe2ca86b, 0x6b4ed253c845a67d, 0x14dfc9838eb64f35, 0x48532cfa1aec263b,
    0xab632748dab941f3, 0x7d3c1a56cb1365f7, 0xafe97d268fa1e547, 0x8bd6249f6a928f4d,
    0xbf591d78b568fa49, 0x75d68e93b19f8ae7, 0x5974d16b736be18f, 0x9ac42be81648a5fd,
    0x5a8bfc9754f62be7, 0x3ea69df78cf95b41, 0x3c9dae16a423e87f, 0xf79da836183d945b,
    0x7f93bc1e3ab15829, 0x9d1b8fa2783ec6fd, 0x1472c3df379a54c1, 0xa265eb3fe5c91b23,
    0xa46bc37d12ad85b3, 0x78f53de2a965eb4f, 0x2acfe78d5d467f19, 0x5c4be2a1915e6af7,
    0xc634da2b18346dc7, 0x5a987f329de78a45, 0xe412c8d9387f516b, 0xc5d13e4fec89b4a3,
    0xc123e6df79e3b165, 0xc75d82b396e25b87, 0x596e874c87a62e5f, 0xb6c41df59b4e81c5,
    0x7c25164d25b9eac3, 0xdfab352c4a326971, 0x143f285edb795e83, 0x21e57db48fabd725,
    0xc69d83b4f74ea519, 0x5af4c67ece971b4f, 0x6f879352138bdfe7, 0x683c419a8956ea17,
    0xc92f83ab7b62315d, 0xca7259d1dca94135, 0x618275a3e196b75f, 0x1d5b6c8376214ca3,
    0x769258ac9b7fc625, 0xad947fce8f5d42ab, 0x38da5cf4e3da6179, 0x9a7d43cb71d9fe63,
    0x8371e2f6857c4da9, 0xc2efb4168a76ef31, 0x98523d717d6ba31f, 0xcf5873b29df2537b,
    0x4c85a9f7c6d2fae3, 0x84a39ecf47f3aec1, 0xbc4237a6f12be359, 0x7c136d4fba85ce39,
    0xd9e356419a42368f, 0x71ebd42c34d2c8e7, 0x8a57296f46bc921f, 0xd2ab63f9fec845bd,
    0x238dfea52a7b43ed, 0x31b5fe989cd653ab, 0x814de53a1ac38569, 0x14329bf6d183b5c9,
    0x569d2c1a5816e2ab, 0xcd64172ad1938fb5, 0xe21d45389e63bda7, 0xcd25486a639df17b,
    0xc7defa45bed2974f, 0x7b26d4e192c48a7f, 0x43ad2c75cb456ad7, 0xe3a48cb62d8a4ceb,
    0x8d6bcef2ac12b59f, 0xa95418cd91f72deb, 0x16c5d942a581fe23, 0xcba9e865b5aec24d,
    0x792e1658c872adb9, 0x5ae2d3cfbc6a2fd5, 0x92adc64f8e46d79f, 0x3b45d87c3e7fd9a1,
    0x95ad147b6d874a59, 0xc9def1a3514ba68f, 0x7b5ae296753d8cb9, 0xe6321a58a81e9d4b,
    0x1b2a8dfcd1492673, 0x1a73db24e791b6f3, 0x25abcdef98c1faeb, 0xb5d692c15c13b29d,
    0x3daf7c297bc563a1, 0x7e9bd243612ab543, 0x26ead517df2a9c63, 0x396ad18c6cf982b7,
    0xdf351e481829a4f3, 0x986f7e4c8bd47e23, 0x5b812c43c71e8b29, 0xde2cf86a938f2e41,
    0xb68795fe9c12d453, 0x61c8f927542bc37d, 0x821fde4367d8ab23, 0x9af587cd6c1db257,
    0xe2d9374624e867db, 0xbe4c63da79c5deab, 0x86e541d72f84bd17, 0x4ef5268d6ac275bf,
    0xf94be3c8ac465d31, 0x754f6c32dcb964f7, 0xaedb6319fb4c8253, 0x1deca65b4fd9ec23,
    0x38461f7e1f75e8ab, 0xf4162c5e7b641e25, 0x785b4cdaba34df29, 0x7a3b95687dea6bf3,
    0x68df9ea5e9d34785, 0xe378baf5abef5431, 0xc192a8342ef6a39d, 0xc87dbe3124cf7e31,
    0xf1dc8235c9254867, 0x3b1d2fea238e74b1, 0x18c32d6a35c1472d, 0xe18c6325ecb8d245,
    0xb92f437dea58217d, 0xb317ed56c31d7b49, 0xeba6127fc3ef6549, 0x5d67ac8148ecbf15,
    0x21487efc47c5f9eb, 0x3b4d15fefbd1e369, 0xed864f2b413e8cb9, 0x7e653cb1b5c4961d,
    0xedf234713ec29a4d, 0x72ed4a5c49d37c5b, 0x4985a23f9c678421, 0xa16342b51de485c3,
    0x37d489e567ba25c3, 0xb78631efdf1e974b, 0x3e52914d75a4ef8d, 0x29d4af8ec624a3b1,
    0x2e3d1b798ef57a43, 0xe751cfb68bfc5e21, 0xde579b48d832f9eb, 0x7f96ce259fce12a3,
    0x87f3c9a5b23ec975, 0xa2c9ebf4a642837b, 0x7cb3e84a4efc8ad9, 0xa14792cbce4b526f,
    0x2c376fba94b3ead5, 0xfb5d87ac6bcfa4ed, 0xeb5cf371e83762cf, 0xb9f267d12e8fbd73,
    0x287bf6da786a2b51, 0x4287659bfca7b5d1, 0xd94f51287dfc63e5, 0xf73c86492c364189,
    0xa6c1fb8d53e4f68d, 0xe93825d1c6b573d9, 0xbc2f763e2e81d59b, 0xcdf2531616db8f23,
    0xd7b3f4a1d13f84eb, 0x9d471a5be75f29d1, 0x412a73c9c2678d53, 0xd8ce5a4284965ea7,
    0x85dfa12b68db4ae3, 0xd9ae16c85a3246e1, 0xf79c238a714859cf, 0x45167a8bd763acb5,
    0x95b47186d5b23fc9, 0xa3e86b19462afe89, 0x7f315862169d28c3, 0xe63a9bcf3adfc125,
    0xc61ae94db5a462e3, 0x1948fa32ac6712db, 0x653e9d7124af1b69, 0x87c9a5f2dc9e2b83,
    0x526b84731b846dc7, 0xcb7ad513687da51b, 0x5fb36714cfe6a893, 0x5e6bdc13d638fa79,
    0x5e61a9c312daf943, 0x1375fae6948cd2b3, 0xf812b6ae672548b3, 0x6219c547596f47ad,
    0x52f7b4a3d17c8efb, 0x7afd15e4ba67c453, 0xdc3eb97f1a2467f5, 0xc6428b5d53ad8c17,
    0xc583de696c32ed47, 0xf43726898e27b519, 0xd43ea8f2721ce849, 0x3e964abc82dfba19,
    0xbe8291c5726813ab, 0x76a4b2181eac236b, 0x8ad6b42374acef15, 0x4783c5d2c2b98de7,
    0xfabc657de98d1f53, 0x2ca85d74b96714d5, 0xdc879af3a384d17f, 0x589461fc48657c2f,
    0x7f23ba1dc3a75241, 0x9ca1643be786b5a1, 0xb2d36ae16fa957e1, 0x2bfc3e7674b8cd61,
    0xead15fb76894bd1f, 0xd168c2ab21f854b9, 0x21a45e73e865b493, 0xa5763cfe86294c3b,
    0x254cdeb893dcaf41, 0xc35d189fba84e57d, 0xc2fb69483ad157bf, 0x7f4d8c6eaeb358c1,
    0x72d6baf91fe386d5, 0x39eda4b85416b8e9, 0x12ae35d924a7e93f, 0xdae5b13923af1cdb,
    0xcb3647296a15c8e7, 0xf3ac1b97a647c289, 0x87f12c4d2d13498f, 0xdec723a89ea3765f,
    0xc16d3e29c65ef7a9, 0xbef25c871ec6a93d, 0xc1b687de9e72514b, 0x34ec85a6acdb4257,
    0xf8e3ad7b16eb825d, 0x2b8a4965d6be57a1, 0x9fbe25ac7c3f26ad, 0xb219d6ce2fa3b791,
    0xb82cea935be78acf, 0xd346e1825d824ab7, 0x1945fda3a2b98f51, 0xfeb152c8eac96b51,
    0xa1d793eb4a186ceb, 0x345afe78ecbaf267, 0xe4531872376485e9, 0x49c2ab6e3e5af627,
    0x13ab6429ecd4351b, 0xdb9132c4ecdf817b, 0x47e9b321a4f6128b, 0xa93e6487d9b12643,
    0x16aef38573dbe54f, 0x61cf3e2d816e53ab, 0x3cb2891eca14b6df, 0x5f8e17dc6dca3b81,
    0x97e4618b8c5eb7f1, 0x2b95ac1371feacb3, 0xa3261948d68ab9f7, 0x31594cd685cfa731,
    0xb32d97ac1a27d4c3, 0x175fb68d6b5dc381, 0xa8d674be48b261d7, 0xc2e47bdf5d2cf17b,
    0xe95f276a52e4fa17, 0x4fd18be3c5124dfb, 0x284e3bd1fe6dcba9, 0x6ed327afe84bc927,
    0xbf7a341c15473ead, 0xad7f4893ca19785b, 0xb9d683e5ceb98a6f, 0x58f1ea63c9a5db4f,
    0x6b31852f5fc8269b, 0xc9b15e237e3492f1, 0x5da26e3fbf986a7d, 0x2316ae57ea97d3cf,
    0x254793d67acd2fb1, 0x8e1c97237a6cb1f5, 0x56cf427baec5f37b, 0xf84da356e8523da9,
    0xe4869a53c978ea5b, 0x162fec3da59f3c6d, 0xd83f2e94687e3f45, 0x2bde9a64eba4f861,
    0x8613ce7dfc5a71db, 0x245db6fedc9ef6b1, 0xbf56983c67fa34db, 0x59a126cf1a57f283,
    0x69473e5ce17496a5, 0x654d12e956129fed, 0x87faec15df8ab1e5, 0x21dae8fcd1abe279,
    0x3a197e829efdb4c1, 0x1af57c2ecde6a823, 0x39174ef6eb39a61f, 0xac5ed1b61f78346b,
    0x82b7e915cead468f, 0x634c7fa979a5362f, 0xa6feb843f5a14b63, 0x719468ad5b32af19,
    0x29f1ed5ba18c6379, 0x75fd1b9a43a7256f, 0x216837eb2185f6db, 0xbf96523e26ef95a1,
    0xb53678c9a4c589eb, 0xca17b8e6af5e6849, 0xcd56b18ad1a34297, 0x14e82c79e849cf73,
    0xe637f5c47ebad2c1, 0xac923e754bf92a75, 0xb526f13c6e583d7f, 0x1726d8a3978b36fd,
    0x5c19ab863864fae9, 0x1ea952c4f2d87eb1, 0xcfba7352b4fe8ca1, 0xe3189d4af72a1cb3,
    0x2ac68b7de56f482d, 0x834bfd79fa9ed86b, 0xea1d96fbecb7a13d, 0xa572d14b39726ecf,
    0xd1462ea74a16ce5b, 0x9736dab5246a7e93, 0xb45df2c9e39d2581, 0x2a7d4b8e61d587ef,
    0xfe8159c76bca87e1, 0x176ab2838b7c3a9f, 0x7afe16d8f129473b, 0x3179b5a43b87ec61,
    0xe79c3f262ea8cf7d, 0x29a8d37fad9854c3, 0x63e5fd9267ad415f, 0x935e1d6f5ad1e68b,
    0xcbda4925c219ad57, 0x543c19287ea1fc2b, 0x59a6bedf8d2a154f, 0xd3bf91563fc6b895,
    0x62c713d869bfcd53, 0x15ef74ba264fcbed, 0x4638e912c24b9af1, 0xa72bfdecfb7846c1,
    0x157cfb6a2315b8af, 0x2f9b8e5cf67d13ab, 0x86d93c458c6574b9, 0x8692ca7d295e486d,
    0x741bc52f429d3bf1, 0x2e195ca348af695d, 0x1ce7a536bfae4c3d, 0xdf914e5a59be167f,
    0x84bf12ed3be27d15, 0x2375fda1b8ac4ef5, 0x16e23c8fd5a7e4bf, 0x2159abf651eca643,
    0x14a78f692d9e8641, 0x5ba4e26f75b2c14d, 0xab5c16495f3d4821, 0xc9375bea6dfea4c1,
    0xa8e695bd3d62fe85, 0xbe3495c8f5e2ba9d, 0x8b6493e1e9f673ab, 0x18cd427ad2ca86e7,
    0xf8d6b3454e5d7831, 0x9fd7154245eb1683, 0x9ac5bd37d2ac5b67, 0x8e2c7f9a32ecf18d,
    0x5f9c64db85df173b, 0x24f513c9c1e83fd7, 0x65de39f75de8a43b, 0x249bf67d9f4ab53d,
    0x1c8fd9e74d56efa9, 0x529ec378746ef53b, 0x5e7fa3b82bf6a873, 0x8c1f9a5db783f5ad,
    0xa45e81b35af23d49, 0x49fe2b17816ba35d, 0xc6ea27f83c271ae9, 0x6c375ef827ae3945,
    0x592c641a1694b5f7, 0x21c483a76821dc49, 0x24fd7c8bc9f21875, 0x17f2dc6abe96d587,
    0x67f1b9ced4c28b73, 0x925e7cfbe12d978b, 0xcd42b31e5b6aecf9, 0xafed975ceb15cf29,
    0xa9152fdb1584bc67, 0x14389c26d793b8e5, 0x9427368a39ba4f1d, 0xce79f138fa679835,
    0xd31a8be6b2c43f59, 0x6ed3182f684fdae1, 0x5acde4f9f6153da9, 0xf627c8e13ce82db5,
    0x3a86dc42eab5f749, 0x8fc47d6bce82d9a5, 0xcd36479f931862b5, 0x784b91ef7312f9ab,
    0xf1578ea9acd165e9, 0x837b54e6fdc32597, 0xc264a1ef6298a4b7, 0x574b31d6fcd5879b,
    0x5a493d816abfd297, 0x6957be8345267be1, 0x53e72cdbe27c18f3, 0x16b724594a758b3d,
    0x3a8c5d196534cf1d, 0x5a97bdf13e2bd4af, 0x751a42f3c84271fd, 0xe4239fc121db86a5,
    0x81754c39c1a4587f, 0x8f4ba67c7cb42e9f, 0x8376f14c85fbae61, 0x782af1e67f624db5,
    0xab827491cf96bad3, 0xe62bf91a3b692541, 0xc8ab245e42d7a9ef, 0xbad78163d82cf5b3,
    0xb457aecd39e157df, 0x7a92dc13cf67b4a1, 0xe92f47ba24a78d59, 0xe65a3f192f8679d1,
    0xb74821ead53fa179, 0x9571f4eb2c1e769f, 0x4df2a3754753ae1b, 0x2e953db6951ab437,
    0x7fe258a915ac63eb, 0xfb532d1abef9ca71, 0x32ac9fe18f576ad3, 0x8cdbe65f65e179df,
    0xecb56d18184cbd27, 0xfc8917d3c1d6af97, 0xbd835f2a3d9657fb, 0x893d16a5389cabf7,
    0xe2f43cd8a8ed5647, 0x6ea9c815d23caf75, 0x5a36db928f4e1b69, 0xfdb27486243df6ab,
    0x91aec632a8eb645f, 0xc241d53ae58ca6d7, 0x83b651fcbae278f1, 0xf1b46ecabd5a9781,
    0xd1bc7968d78f5ac3, 0xbc31df48e8f29d63, 0xc56398423ed5c7fb, 0x1728df93d7281e45,
    0x43c2a7ed51eab763, 0xae3b4526f52d1863, 0xefb4d735192b6e8f, 0x79653af4b316e285,
    0x768df52a8c65dbf1, 0xdbe796f3726eca85, 0x8ecb425326183eb5, 0xc943bfe1ac8de4b5,
    0xdbf37195bcf9d4a1, 0x4f29ab8d4218c9ef, 0xac4f1b98b7d38e2f, 0xbde7f5c4d6548f93,
    0x327d6e9a28e9fcb5, 0x16e8a4b24dbef167, 0x6d9cf75e1d98635b, 0xaf5b6c797dea3bf9,
    0x9ba5716249d56f13, 0xc318bf5da634b8d5, 0xf257e41d48ed7f69, 0x4c7e93b64e3d798b,
    0xad435b6cb49aec81, 0x69a72bf8d7fc2413, 0x1e7384c9a87f2e91, 0xa2847b6ecf6b9853,
    0xd3751afb8c1f3ae9, 0xbc598a1e935bf781, 0xbaf29d7c7edaf529, 0xc7b38d41cb1a9e63,
    0x36eb5c497f849265, 0x17edbafcac59e48f, 0xde96b32a91ca654d, 0xd41bc89a7bc2e1a3,
    0xeb1f78956982cf73, 0xd83261fa2eafc453, 0xc1ae9f863fdea627, 0xd3c98456d2e64b97,
    0x7389b54eb87a942f, 0x2d814637bc897631, 0x4cfb9e2a7c3694ef, 0x7cfda2b648cbea7d,
    0xdb4f698e1fa59ce3, 0x3a54fc6795e1476b, 0x6f9a531b7628eb3d, 0xe269b184bfe619d5,
    0x183e97cf2c96e1fb, 0xec7f1b84a8924e37, 0xb841fca685e9a741, 0x165cf9d31de68fb3,
    0x9d6e4f21cfa68317, 0xe53a9f185d7c4839, 0xa82d1c456a3f8e27, 0xfabd87465819cae7,
    0x5ba1c9628e2d1ca7, 0xb7694a52d34281fb, 0x348c16b2c34bf6a9, 0xc7b981f6a48fd3eb,
    0xdf5a3b46bf3e7429, 0x6793a4d21ad35fe7, 0x12d78a6b6a17c8bf, 0x1b9f428ef451bc69,
    0x8e64cb9ae2b79315, 0xcf5873eaef368b95, 0x5d2746ba9f6e41d3, 0xa47b91e2b253a9cf,
    0xb6543ac7497c3e8d, 0x2afd7e94e3ba795d, 0x24e81fcbfe964513, 0x2b5f647c732d95bf,
    0x794cd68262fbc3e5, 0xda48bec9f65d3ac9, 0x9ea86d746a1d59fb, 0xfa3ec49724796cd5,
    0xd92f14a7fa4927d1, 0x76e38abd9b276cf1, 0xd32ac67916dce345, 0xf654d7ec4fc9283b,
    0xa51834b24e865af3, 0x6ce978dae29c5463, 0xf91ca4e2b6a23ec7, 0x68fa793b8acf31d9,
    0x9e51c3d461cf8935, 0x6712ceb31fb37625, 0x8fc4195dbaf8d741, 0xf76ea4b9e5a24897,
    0x5d2eb3c9c52d3f89, 0x756bf29ce6b27d51, 0xe78f6315a941286b, 0x93725afbf976ea8b,
    0xed936b7ad158ceab, 0x683dfce12789daf5, 0x4f56ac91da9efb37, 0x3ba5c9864f6952d3,
    0x215e47393f4db851, 0xc4ebf8adc218e4df, 0x81ac2de97b4de8c1, 0x312a97b8e67fc419,
    0xbe5c1a62f8ebcd79, 0x4519a7d81d5a9f67, 0xe61b2a576dbc1289, 0x123acb9eb9f26e17,
    0x45cb781f36f27ae1, 0x2ac496e58f59dc71, 0x94b5817eb75916ad, 0xc59d123ba6dce145,
    0xa463ce812471e59b, 0xd6ca47197d63cea5, 0x462a98fba3fc795b, 0xc8b3e96ace82a6d5,
    0x5ec84ad6967d28e5, 0x74256f1cf583416d, 0x32fb5c1afc5b6d49, 0xae932571b9a6dec3,
    0xfebca639afb2c179, 0x728caf5928ad65c7, 0xc6a971f5b753da6f, 0x78a15df374d5e1f9,
    0xa7621bdcefab6c89, 0x7da38f94a6391d7f, 0x64231eba8917da35, 0xde156489af52eb47,
    0x9bc1ed86f4596a37, 0x9d4a3ceba542ed13, 0x9346d2ef1d795f2b, 0x62391c84dfb824c9,
    0x21ed8a5f38157b4f, 0xf95d368c28dc5a69, 0xd473ae5945adb673, 0x24f7d593b54d6917,
    0x2a8e5f3947d28ac9, 0x28b4f6c5149e2d65, 0xf3b86a958931d7bf, 0x25a73fb9c1546eaf,
    0x2e94fc861e248a7f, 0xa52e6cf937568cad, 0xb78e352c8efa3619, 0xa738e62d5c12386f,
    0xc63f142918ae2f9d, 0x91bc87da9486f12d, 0xa6fc8eb9f64d9e23, 0x916af4389a6cb7e1,
    0xcef532dbe78a562f, 0xb8f715ed7b9d23c1, 0xb348d765cb3f82d9, 0x851cfda3b94d5fa1,
    0xcd35ba71416a2857, 0x3179eb54685e74f3, 0x53eb967c34b61cf9, 0x37b2af98f142e59d,
    0xdb1f5938f76dcba9, 0x3fcd14b5874a561f, 0x8295a4beac86e9db, 0x712bfa3c67edf32b,
    0xbe928671af5278e1, 0x6ba42f918f1c5329, 0xda89be41897312e5, 0x52f7631821da354f,
    0xa415c627ae19bf65, 0x8fcd2ba7254f81a3, 0xbd437ec153a49c17, 0x36f5c198ce5794fd,
    0x18b3762c9427ab15, 0x9e6adfb3a2f6edb7, 0xa9de57c8fad792c5, 0x124cf3e8a3c2f815,
    0x5fe7d4813a4cf5d1, 0x1e4576b2da19ec7b, 0x1c3d6742a7c632d9, 0xf513c294ca2613e5,
    0xc6fb13a756fc78bd, 0x384f17a95f78c169, 0xfb5da9e1b8e32941, 0xdf69c4514a815df9,
    0x3145d6b7b4d2c78f, 0x7b94fe1a28a459eb, 0x981237ec34f687a9, 0x6ca2bd8f3e8a427d,
    0x6f5deba3f128c759, 0x2befc867c4df6ab1, 0x435cda67a296583b, 0xf3e97c5be534b2cd,
    0x56dfe37c5f94c827, 0x2c56478a186bfc97, 0xce98745b4b9fc625, 0x2d4fa16ecea1583b,
    0x412ad5e76e4cf859, 0xc9da362eb39d72f5, 0x3ec259d4ad21c6eb, 0x8f97bd4ac91f5ba3,
    0x53dbc81a41d9b785, 0x9524371b9d18e6f3, 0x24539be7cb96375d, 0xdae72419f3b284c1,
    0x6173e842b687f9e3, 0x2b6c5478278e15c9, 0x982fcda562c197a3, 0xb67f3c2ad498fec1,
    0x7b132c65a6245193, 0x849b361efea8c573, 0x29813af6ce9d2571, 0x6e24cba3841a93cb,
    0x7498bcda1c9452fd, 0x3e5f182b276e1bc3, 0xa6cf7db3925c46ad, 0x4dc368e1a2518bd9,
    0xe4f6bca5c5274ae9, 0x3fd84e97af29514d, 0x391b846712ea49df, 0xdb82ea394b9781a5,
    0xa83b791e4e1b82d5, 0x98546ebd6a4b53f7, 0x7baf8de181e7965b, 0xd2acb78184ac37d9,
    0xa246ef973d96fe75, 0x9a2f8e4168a1d2b7, 0xa92bf3d4c9723145, 0xde4f72bab2318efd,
    0x6bfd4e592adb46e5, 0xa9f318b64827a3e9, 0x7da1cb56ad589b31, 0xf1a569bed86c25b1,
    0xe4db926ce8b54a27, 0x4f65e1abc31f98b7, 0xc47fd3863b9ed27f, 0xc1b937289fe28437,
    0x9ec3abf8c8ea6523, 0xb914df2cb569a427, 0x84b16d29c1a74e6b, 0x6712c5ba4168a5cf,
    0xbd2c7645b5e1fd69, 0xc9f6e5b8bc793261, 0xfab2ec898bf357c1, 0x6c73e2fbf1bde387,
    0xc8a59124d28a14bf, 0x9fe4abd1295ac8eb, 0x9746d5be95764a8b, 0x38c4e6a9c9deb281,
    0xb38fecd932ed9c57, 0x92de58b19de28f63, 0xca8b15d325bc36d9, 0x72519fcd16493ae7,
    0xe78621caef58c9b3, 0xf7a9345e387649d1, 0x7a2c49582946a83f, 0xb145fd97ae354cb9,
    0xfe2539a7f5e1cba9, 0x5ba74ce3af287b6d, 0x6f83adc2baf84215, 0xb93a7f6cec3b741d,
    0x97a562b198c3b25d, 0x9486c1aebce3728d, 0xc2f5b1e7e38679db, 0x7d25e3c1f38ad57b,
    0xa18b4692f5b8e7a9, 0x34d5eb17a7b38c15, 0xe4ac71634f7c9ea3, 0x1db349ca967cdb45,
    0x496ac7f589e3174b, 0xf6ac7529f189c3b5, 0x51fb26745ceab687, 0xb468291dbc9efd15,
    0x6abd59c82a941ced, 0xec9d4af26471da83, 0xbfe2619a4cd631af, 0x957d4a8b864a2b37,
    0xb3197ed2c1ea2b73, 0x896d1e458d6a9c57, 0x362d5c7bc7a893ed, 0x92ceb6fd4c37efd5,
    0xb8c57214638a2549, 0x9b716fdc78ec3fbd, 0xf15ec673a9e7561d, 0x9a4d8365e187fb63,
    0xc1fea6d9641f93ed, 0xd3e9c6451d592a87, 0x95182d6fd423b8cf, 0x2476e538218546cf,
    0x4ca6e3d8726d984b, 0x861fc4271b37e4af, 0x2db7831a87f9ce51, 0xd265f1e91c2df87b,
    0x7891ea4c5a3dc497, 0x1d635b9fc5892b71, 0x329bd7f5ec4b6d1f, 0xf3c1b5d8acef953b,
    0x3fd75ab946e8d9ab, 0xa65c498b5b8cf241, 0x9461ed5793cd6715, 0xf732d1c6b6c89437,
    0x36ba5dfeb8f5a423, 0xd592ef86f68ce519, 0xa16b243c7c4f98a1, 0xc1ef8a25b56a7c91,
    0x8bd372a5c98756df, 0xf95a82ec8eb691f7, 0x3b1a9d7fce5f2489, 0xbe61a78fac6e231d,
    0x28d35f4b74a1c39d, 0xd79f4ca52948e563, 0xce41526bc9d8b6f1, 0xd9f613c76ed2fc75,
    0x5caf1eb386a79f43, 0x2dca51382d6b8a59, 0xfb6e921858d9eacb, 0xd1672fabf2de78c5,
    0xc9adf8754895a2e1, 0x9358f4ca81d52fb3, 0x9c148af75c7981bd, 0xe12c48d7a5ecb843,
    0xeb2347f1374fc6ed, 0x17fbe2565a7d82e9, 0x6fa7341d9124cf8d, 0x2cb9d6176cad78b3,
    0x7bf5a8c49f8cb53d, 0x3f4ce2564a87961d, 0x6849f271e14a3f67, 0x981576b3268f3ac5,
    0x54e9b6ac53719f2d, 0xe1cf4367e7acd561, 0x6b235a4d9d4c53b1, 0xd3f19b726c83e7b5,
    0x3c94a678f8e65cad, 0x618c94f2e34bc861, 0xde597f313e5cd649, 0x2bdc9361f58ab149,
    0x872c35bfecd2a5b3, 0xc32bfd481f5b48d9, 0x8c43a167bd9174e5, 0x7de3c5b8a36e9421,
    0x14fba39823a1b695, 0x42865d3a21a7f6eb, 0x82134f76f9285ed7, 0x1695c84da6e4f851,
    0xbfa23d752c6ea597, 0x5abc1483f73a5ebd, 0x6afd4b931657dc39, 0x34e618f2a6b9de43,
    0x57ecf8ab312e84ad, 0x53e9416789dc1ea7, 0x329df486285a9137, 0xecd6a3b14e2f71b3,
    0xe8b9a6c4bc5e249d, 0xe12649fcb8ca36d9, 0xa49c37d2fd7ce159, 0xc691754dce625387,
    0x15ac284e682ca391, 0x79a621dc423e9af1, 0x6bfd3794352f16a7, 0x637fd28c3fe128ab,
    0x3b4a296c15fc8e43, 0xc9a148354e5fcab7, 0x87be2d5a4f8e162d, 0x56fb3e27be679f21,
    0xa2cb4f13b5ced947, 0x8f72693b82937bd1, 0x8751ad647892dac5, 0x5794d63c971e3b85,
    0x8c1e4795697ac8bf, 0x6a7ef93cd37cb5e9, 0xbe184ac717a83b2f, 0x54ef39c7e6c23da9,
    0x97421f5cb3fd7249, 0x817abc5f7c34b6a1, 0x8423bd5e8ab254c3, 0x75dc2319528efdcb,
    0x58a1ed73daef652b, 0x76415bed9a1c6b53, 0x675c2daf285e1a43, 0x3d2e4ab795b7a641,
    0xda68f94efb546a19, 0xca5f968b41af37e9, 0x5ba6281d82e54c17, 0x6df3e98a1762ef3d,
    0xef593ba73a8769d5, 0x49f5327acef754d1, 0x318657a93a246e9f, 0xd2bf59689d3a785f,
    0x725d8ecb481e3ac7, 0xc8b93a5df812b6d9, 0xc46f3da157c86fa9, 0xd4cf92a82df9cb17,
    0xa52ed4972c86954b, 0x6983fdb7ab4ce521, 0xa42b38fc7e4c563d, 0xe95cb21656ad1f49,
    0xc983a165148dfe75, 0xe83cf4d649e7f1ad, 0xed4af7686e81b345, 0x842b3ac98a37bc4f,
    0x856ba14f4e52dac7, 0xfa59e142a53e6c7b, 0x92e5dc48392b581f, 0x59dac4b7194af3d7,
    0xf9837ae413c68725, 0x4d71a28bcfd92861, 0xa4fb79c2ad51e429, 0x5f3e6c872536c9b1,
    0x36849aef5e48c36d, 0xb3ae78c26d9a51fb, 0x9f52dab428fb7193, 0xbde147a21658ec23,
    0x1d83a45ca46d275b, 0xebac659749d6b2f1, 0xe3512cd815fd2b47, 0x7918afe4b9c46d81,
    0x8cde16454e6b3d75, 0x9cd8532f7438adbf, 0xbe5af6d82eb59a31, 0x36dc2b75942a85cf,
    0x14cf923e62b8ac39, 0x5dfe7a1372bcafd9, 0x67fdec2595b23817, 0x9d237beaeb15f9c7,
    0x4128f7b3a56b79f1, 0xeab9815f8fa264b7, 0x4fcde6a13be7ac69, 0x698b5c37526da8b9,
    0x563ea4cf27aedb13, 0xf56c8b9274fedca9, 0xf6513d276d32eb7f, 0xf93b546a632a479b,
    0xc859b16ac6928b53, 0xadb95e3fa4931d5b, 0xdc91453b28f79341, 0x63b8ed4c9d1c7afb,
    0xd3a64271c63e582f, 0xa3c2d7186c3291ad, 0x27cf6154841fb7a3, 0xfa1e54b3da17f859,
    0x94fea632f683bced, 0x16c257a32b1936d5, 0x57a81b34c5f9a67d, 0xfec8623974962fd3,
    0x37a6eb91863dc251, 0x4c6e2d181e753a4d, 0xdabcf94368f317d5, 0x5ac2d1b63fc6297b,
    0x84fe672b2a94b873, 0x9a84e32c8215da39, 0x2b37aedcad215893, 0xf9dc872ab2a48635,
    0x4ea97d2b79e2b35f, 0xbf283d178d714a25, 0xe9724cbd1fbd5789, 0x8ba62d35e2fad473,
    0x7a2431c687ab4ced, 0xd5f72a39c83de659, 0xacf87456dfc569a3, 0x574bec8d91325ba7,
    0x28b6d1cfac328e1d, 0xd6b72ce139e84dfb, 0xc21f6ba541e8c92d, 0x478eab1279cfb5d1,
    0xb2dca49eac8d2bf5, 0x3cb75f914a39d6f7, 0x259d6c378c7e345d, 0x56e8fa21cd3b2e41,
    0x4679fb2ad3e9125f, 0x6b58e3123ad71c89, 0xd7461952afe75631, 0x9b3ca6e7e9543cab,
    0x8a4f29e5b6a19e27, 0x2b9c1a8e5478f6cd, 0x7ef245cb14a9826f, 0x273a5e8cdc268eb9,
    0xd1e3798cea8192cb, 0x1eb2adf63bc291d7, 0xb87432d58143ed57, 0x42d376ca29ebd1f3,
    0x8a349ef536217c5b, 0x1eb27d54a64cb185, 0x8c423f51385cba17, 0x6e58b7cf587ca3bd,
    0x197358b2a8d6e375, 0xfe9c54b83215ac6b, 0x16d8953a51d98c4f, 0x6524f7bc51bce963,
    0x697adf8ca8629f5d, 0x1d2b5ef839c6b547, 0x9bde328c1e283f47, 0x7d385a6f178c6e59,
    0xb3259761b8ca3427, 0x9345d21e548e3afb, 0x3b9fa8d2c6a73ef9, 0x2a93e85f3165eac9,
    0xaf64ed979b3581d7, 0x3cfdeb85847fe5b1, 0xef28354b721ec38d, 0xd836cba1dc68f247,
    0xf3bedac24578aec3, 0x4f1cba3e1de8467f, 0xd6854e391dc53649, 0x12e6fa936cf3be59,
    0x2b8e6795852c461f, 0x1cd9b4a8561dab29, 0x975fa38e5be286d7, 0x3be76dc5a468e129,
    0xae761cf3231be5f7, 0x92c7e185cf25ba41, 0x69b5ae8d2ea63b41, 0x51f7ac69b5d84ec3,
    0x4eaf51b895c6a8bd, 0xc1bfdae26fe145ab, 0x9382a5cb1bc69523, 0x62d13a4b4e8ca251,
    0x8e36a5cd5d298367, 0x2d7158a3e9b5f7ad, 0x6a52f4195d4c9271, 0xdc562af81728e3af,
    0xd4afc527e2583b97, 0x76ac1582ca1d3485, 0xc56afb41a4e6d925, 0x73d6fea963c198ed,
    0x4a3c571b8ef561b9, 0x61d5849be3ab8d67, 0xbc1a62487c85364d, 0xed21b59c75afce91,
    0xe79358f45f296831, 0xc4ae6fb8a9e1d453, 0xda871b6375f836cb, 0xda27e681754ab2df,
    0x2e5f961c43cab29d, 0x7913d56465a38d7b, 0xd49e5867217ed365, 0x18cd953fef82d79b,
    0x596bfa3dcdb5a963, 0x31259e7419fea35b, 0x182ab3fc3e8bcfd9, 0xe18ab423ca31e5b9,
    0x7e3b64fa7a856423, 0xca87456fa7296f81, 0x4a1c6278976a2d45, 0xf8a91cd74f8579ed,
    0x54c716fa9ea641fb, 0x69182dfead8f397b, 0xd137ce5a5c2abd47, 0xfd681ac3c423ad81,
    0x26efab4924d7936f, 0x59ead36f83e24f97, 0x12a5469fc814bf39, 0xba8ec5f3f17a2349,
    0x4e63a2bc6c3a5e49, 0xda47823c4965b1a7, 0xa1e8c2fd4a5cfe81, 0xcfd53796ad843921,
    0x78a49c159c64af17, 0xeaf73b29cf67394b, 0x5cdb31745268cb37, 0x2dab73f4e4d6f5a3,
    0x62c81a5ba4c5238b, 0x2519bec85871ad2f, 0xfc839b7daf83c21d, 0x3e9c68ba59d68a2f,
    0x84c2f9ad6c782feb, 0x532f678db91e56f7, 0x8f541dc6c38e5217, 0x9fc3a21e27fe849b,
    0x94d71eb59c31728d, 0x64bc2a7e6a4d59c3, 0xc5376f19eba36471, 0xf764cde8f5e83619,
    0x3fe82a9db284715f, 0x4f1ec3a65ac691b3, 0x2e195cb4cb61da59, 0x8b7ace198e6c421b,
    0x4fa2173d94f8357b, 0x5c176da3ca56f28b, 0x951dcb6739ca2ebd, 0xfa38db16db8f6c29,
    0x95ecfa4d72ab53e9, 0xa1598bde429fbec7, 0xe3f59a82a86b4f23, 0xdc48a217a2dcef97,
    0x41dace8ba14b785d, 0xbf859ace642d7fa5, 0x869af4cdb639e247, 0x45d2138adc4975f1,
    0xfd1a7b638392d5a1, 0x35f76eabec5afd93, 0xac812d7efbc824a1, 0x9f5b86324275a86d,
    0x128ced36a86d514f, 0x74bfc91d639d7e25, 0x7fdbc28e5142f36d, 0x13a8bced9b75ad83,
    0x8e4cd52367e3cb4f, 0xf4e6cdb34527fad3, 0x473a926babe96c87, 0x758f4e967eacd54f,
    0xb5c4afde65eaf2b3, 0xc5938fd49824a37d, 0x16c5b793c8d714b9, 0xca95b73fb486e7a3,
    0xf81a5367e4dbc683, 0x69c4ab5f5316a8b7, 0x9b8dca4edc1a59f3, 0x7c9ad5b48c64d7f1,
    0x627a8d318d79a641, 0x8625be7fb3c82561, 0x7e54f831635a8297, 0x8493cf675b86ce1d,
    0x649f25d763485ce7, 0xb8a2763975f62ce1, 0x17a2df6ed583269f, 0xb1a3e6843a2c1d6b,
    0xfe43197829d8a4e1, 0xb215439a1a9e5f8b, 0xab2f6e79c657821b, 0xd698ca5f85d4aeb1,
    0xfba5d4c2947ebac1, 0x36cbf7258a3cd14b, 0xf4bd26ce17fc4ab9, 0xba35e86dc2a9e14d,
    0x5f716d2b1db9c543, 0x2c5719be37c582df, 0xfa9c76eb14d68bf5, 0x487fc1bacf4b3d29,
    0x3152e48fadc5f127, 0xf6243e9d8a465de7, 0x14f73ec939a8de57, 0x4a837df6b1a2c479,
    0xca386efb8c3b4e15, 0xd12acfb7e6b94d57, 0xc815f27926c3948d, 0xda3249bc639da7ef,
    0x3a5248fb7ebfa945, 0x5172943e5a1b36d9, 0xe8124b7d3b47c8af, 0xe6f7d4c212c7a435,
    0xc328f41e294c7bed, 0xf4967be141897f6b, 0x5ec174d8da589b17, 0xd42689c3413cf25d,
    0x6f1842b37468e93b, 0xc749e63d52e47d93, 0xf95aec1b1a4d62c3, 0x2b4c187a2951836d,
    0x61389a54a7f2ce35, 0x58dce2f37fe4b2c1, 0x53ef1a42a9867e45, 0x3f71d2467cde89af,
    0x95e48f32159ebfa7, 0x3a6d1b9c7cd16b53, 0xf86ce725e6b237cd, 0x46b8531e3c21865d,
    0xfd63895cdc3f81e7, 0xfb63d718795c1edb, 0x6cefa25d4285cd67, 0xbf16dc37526ae149,
    0x97b3c52d87932641, 0xb24173ce15462b8f, 0x17ef6285968fd73b, 0x498ad5bcb18e4597,
    0xc164f3ba1b729fe5, 0xae3198fb149c8edf, 0xbd941af8c82b176d, 0x549ce8f6fca351b7,
    0x95df1b42f97dab65, 0xd786a219896bcdf1, 0xc17bef392abf7849, 0xc8b6a2348652a3e9,
    0x9c2ae376d92c8571, 0xbdc8a694bd8a3517, 0x13879fadcd2b4691, 0x63c1b584d7e6a5f3,
    0x3fd469eb96ac7e85, 0x21de54a3a869e74d, 0x3abf4e76e48a71cf, 0xc4e63bd16f542a31,
    0xfb12e86d137c6d9f, 0x8cb9e157edc6489f, 0xd247bf16c7294fab, 0xa9ecbf471d74f3b9,
    0x2b8736d137f6845d, 0xb46d937e724a3bdf, 0x7fdb132e1ef7b893, 0x19f47a2cac9148d5,
    0xe8bd2f195fa94b27, 0x2769f4d15fd3c4eb, 0xc3426d9e2a9e4c61, 0xc8d6feb7d1efbac3,
    0x593d6a1e61372fad, 0x49c265f74b5fe789, 0xa6f4b173c6af17b5, 0xb5d681e7f517c3eb,
    0x7d498ec6adc18b49, 0x1d84acef7efb86ad, 0xb8c32a5d75a9e1cd, 0x475681ebacf2e491,
    0xe289645c9354ea81, 0x75ca4b3df9d5a273, 0x87d1e35431d5b647, 0xbd4af893bce75a49,
    0x74862cf1823a1cdb, 0x69cf453dfec21bad, 0x68cad2ef7f96452d, 0x675abf2c45c1d7eb,
    0x45bf86ace4d198fb, 0xcf254ad6ec7b6af9, 0x64def9c2a7429fe1, 0xc36fd145ed4f9c81,
    0x96c52efa5174bf39, 0x37f25ea681f69b53, 0x2a951f6bc9b4a153, 0xd2bc943f62781cf5,
    0xa2d56e7f5823de79, 0xba7815c9e246f375, 0xf6e2857a2a81ec75, 0xf7cea84273c586fd,
    0x9417db234b28c5e7, 0x71a83462157da9c3, 0xa5879e432d8397c1, 0x5c6e7bd8cedaf96b,
    0x637bacd5baec9485, 0x7628af1972189cb5, 0xebd648a5cbe3879d, 0xad9bf368d8b5432f,
    0x596d8f1cea3d749b, 0x7dca42165672c14d, 0xb74832c6e7fa8cb1, 0xc53269419d278a15,
    0x2eb348dce34a7651, 0x125e3d48c2386b9d, 0x23d65c1ecda74185, 0xb84d12f93def8c27,
    0x59df61bc5813e2af, 0x2b9d83e54af92683, 0x56af931c84c3d7e9, 0xd38b7e6ae6fc39bd,
    0xa3bfe2156e14d835, 0xb123a5d41f28c4b7, 0xd5be7ca9b561f279, 0x7f3c26bd2fa19dcb,
    0xfc84a3d147ac251d, 0xf3728de1d51e2489, 0xcbad5f924327be19, 0xcde561325c39f1ad,
    0x1dbe43c76f3ec41b, 0xd56f279bea51f893, 0xd3ec28b6d129e567, 0xcad7ef8b1a23d54b,
    0xd852ceafa92e3f75, 0x874ac16e36e17dc5, 0xf67eb985f416b2e5, 0xcdab9738dc21953f,
    0x38b57c1927b3a54f, 0x91c65ab828b19aed, 0xe67b2f1353c1924f, 0xe79d45af2783e9fb,
    0xf1cd25792ce48157, 0x53fb1c484ce1da87, 0xe69a1f8d7481ed2b, 0xe79456c2bad85723,
    0xf947c56275fad42b, 0x53d6eca9fec469bd, 0xafec5721c36d2945, 0x856b9fa1e83c691b,
    0x93be6f7892ca3be7, 0x2a17e8494a6e97b3, 0x9d58ec645ec67df9, 0x1e37a2f61d73ae95,
    0xfa3b2dc9a8957c43, 0x79f4c53eb4d17ef9, 0xdb769a8ea547ce8f, 0x2c89e6a3decf7243,
    0x3f59ac86c3451abf, 0x2eadb1c4e4b61ac3, 0x23476feb953f47c1, 0xb61238ef641ef925,
    0xab5178e4facb5237, 0x6cd8a9f43926c7f1, 0x978bc54a894e2abd, 0xbd476e38acf572b9,
    0x26cb78518d529c3f, 0x3216bc95ef867319, 0x14f7a95b58742e1f, 0x7c568beab423acef,
    0x2cf1bda494cb23f7, 0x94a27ebdb5d2ce83, 0x169df235db9a74e3, 0xd38b724ed5e63219,
    0xa748e6f39453ac61, 0xe8c13da981c5ae4f, 0x278f94362c145b69, 0xa9356c423ed451fb,
    0xc795b8e25fd768ab, 0x94782d63e5fab289, 0xabe428c671b9c4af, 0xb9e165c2471d9a8f,
    0x952f48c7b2e19df7, 0x1e5739a4bac8d4e5, 0x8794365ad74835eb, 0x59aec6781f86a7b5,
    0x86b942737ad14625, 0x56a3c14dc2e87a91, 0x27fce3ab34b2cd1f, 0x361bac951a2d89b5,
    0x3e578ca25ad1672b, 0xa3842fd13ef82dc1, 0x2793ab8f2c79ea3b, 0xc5b81e2de24b1679,
    0xd24facb819ef8a23, 0x8cf15e3b7c681da9, 0x4e7c82ab5c16d4e3, 0x2981ebc4d1782b35,
    0xeab23f8d6514ae29, 0xdec6384fe36a541d, 0xb5a71e365923671d, 0x8be7a9f69d7f1863,
    0xdc52ef74a15bc76d, 0xcb7f49e197baec35, 0x8ca4316256cf9e4d, 0x26b48fd1a618e3bf,
    0x54cbd6a12dfe1c6b, 0xf4e6d3c8b3c9e81d, 0xed73cf629183a26f, 0xf6e4b371c3e4f96b,
    0x9a6fd5b2d6c3fbe1, 0xc45a1d785a97cd1b, 0x3c941b7db3ce54ad, 0xe86597db5f214673,
    0xa86eb1456914cd3b, 0x9fea17527f4d92b1, 0xe7c2afd8da2f8165, 0x6bd9a2714eab3f79,
    0x1afe245ba4f7b851, 0xe7d56a18fe5b26a9, 0x37d1845e85cfa637, 0x79ad3fb4d5bea79f,
    0x5d6a1b9e6c5dfa39, 0x25d83ec6a697ef43, 0xf61aed435b7a98ed, 0x1568fa37517698c3,
    0x76efb1251df7ac5b, 0xf43571e6ef83a2c1, 0xd5b2138926ebdf53, 0x8fdc64a7d97ca163,
    0xabfed31c9d3a4ebf, 0xb1fca2de4f65cabd, 0x1a3d29652395e6fd, 0x9cba2d81db495cf3,
    0x2c5768b9561c3d8f, 0x76fd831a9bd7c36f, 0x1df8257be5f169db, 0x859ebcd47dea4bf9,
    0x2d61c3fe6a4b7329, 0xedf5acb2a538427b, 0xd91cbef2bf78124d, 0x4267d93eadc2816b,
    0xe24afc758254ea31, 0x9a2517be5a8c19ed, 0xacf2de3bfca1356b, 0x8e4d32a63c962457,
    0x5a4cd289c87526d9, 0x3e659c2df28b4751, 0x5f92da782d5e9813, 0x6c21afe518ced3f9,
    0xdae8c145ba39fdc5, 0xba973264ec5a96b3, 0x38b6f1c46271eb3f, 0x5f4c9a732bc4f517,
    0xe5427ac16a172f45, 0xea1c6f572f61b589, 0x82f6d1b95613de8b, 0x9482bec3f8452e39,
    0x7bc86ad12594d813, 0x4517d3a291ab7d25, 0x6b84ec2f58d6c371, 0x346785a2f645d7c1,
    0x47e8dfa545d7be93, 0x59cae371f6c3b78d, 0xf7b4ca1645aec78f, 0x495d8f67ae865b13,
    0x26dae7f5b8cad56f, 0x638bd7fada69c381, 0x57ea18f291fe36d5, 0x71bda6e9ae394d6f,
    0x98ef56c2f125be4d, 0xf7569b2ea261e4f7, 0x532fdec7e34bf579, 0xeb1358c48e1963b5,
    0xc93a675251ab28ef, 0xdc3f4e2a4c381a57, 0xc89ead65f42178a5, 0xadf43eb5a97f64ed,
    0xebd4389a7428e69f, 0x6df3b8a73b2687cf, 0x2fa7351e7526cb3f, 0x1afd9423e15f8ca3,
    0xb561e293f8259bc7, 0xac2bf9e3f5a98c61, 0xa56b12c7c651daef, 0x8567ab3f936a8bcd,
    0x2431cae6498f76e5, 0x1aec49fb7d549c31, 0x7fe2a43db1926a85, 0xb794d6c8e56d42fb,
    0x8ce3579dc85d3fe1, 0x5ec1d647c78142eb, 0xb71368e41f2bce95, 0xf4db1c3e937dec51,
    0xcd15f32a218daf79, 0xa2e374fd697b12d3, 0xeba4fd1c49a63f7b, 0xd9b453c25bec68f9,
    0x78463a5f846f9c73, 0xa6c7e259da3165ef, 0xa7564fc2cf4261b3, 0x9732dca5d13765ef,
    0xa4d68be38b231e7d, 0x2a4c7e56275abf3d, 0xf456c2da4e5f1673, 0x8ceb51798cdf6539,
    0xbe176f32e1689c4f, 0x2a59bc78c3d4fa17, 0xf84b952c46c1d37f, 0xc7b35912cfa29637,
    0xd8294165fe65813d, 0xfc5861378469f1c5, 0x924e1bad8a1fc56b, 0x5eaf632c56294fd7,
    0x8ce2ba16481bd5f7, 0x5d2af68e6b5efd73, 0xad92b57c9ce2a845, 0x4b32ae8f31bac67f,
    0x18967d341de34c6b, 0xca93d42e3e8adf17, 0xd5c7813e87dc4b53, 0xf8bc3615be7c6f53,
    0x6e4fa231d137ceaf, 0x6be28371e8732a6b, 0x629d3e87643a7cf1, 0x13974a2d3241d8a9,
    0xe983b4d1a5238f7d, 0x6b475a8e25be6d7f, 0x345192ed38e26a1f, 0x5b78d3fc6b34f2e5,
    0x5c123f4834db2af1, 0x5c42639db92a345d, 0xac2943b1f58c2d13, 0xec638bd4eb84af67,
    0xf7d615ba675482bf, 0x8237a45ea92cbf63, 0x75c83b292e86cdfb, 0x8efda672c74f2b61,
    0xdc83ab74a32be5c1, 0xc2af587d653ca4bf, 0x329d1a46c4a1935b, 0x4c3f7591327cadf1,
    0x4ce1f937a3b78c45, 0x9c4f72d6cd732aeb, 0x9e167b2576f154e3, 0xed9cf41b2a49dec1,
    0xb8f431765e24c6b9, 0x2678df45ab24957d, 0xb4cdae71e87b46a1, 0x7f8e239a78db951f,
    0x7d5f82e3dc267a59, 0x32a9c6576cb2894d, 0x6481375d3e1c86fb, 0x5de964ca98b2c53f,
    0x5a1b68ec48a2ecf3, 0xf2563c4b28c56d4b, 0x257341d6a2d138eb, 0xb861a47d453fd629,
    0x83f9d4c691d562fb, 0x2496b3aca9738c2d, 0xd7a8524f13da26f7, 0xb9e8a56db61d8c25,
    0xea2b13f49c6d4e15, 0x41aebd697a62e18b, 0x496ed8f17e3165db, 0x65914bf78ce297b5,
    0x4c6d937baef17839, 0x7294e36dc874ad1b, 0xca3269d469eab457, 0xb45cfd812d4fe9c1,
    0xfe3c461d365e7ac9, 0xdf5e26a9de536bcf, 0x3786abd5924fd651, 0xad567f38bc26a8d3,
    0xf51dbce36c83baed, 0x3871fcd28b31d479, 0x9bea5246c267af8b, 0xda76c58bceaf85bd,
    0x956eb128d78653cf, 0xf6c32db56ed721ab, 0x6891baec2147dc63, 0xf638d2e4cf461eb5,
    0xbe928dfa9c6a37e5, 0xe8c7f21b49726bad, 0x28ef61534c17853f, 0x6de38f5ada51e6f3,
    0x259fe76b6183bc57, 0xad3e957c6e4c5d37, 0xf17a4ed5f53c48d1, 0xfa356894e19a6543,
    0x27e46a5dcd63748b, 0xba41893f719ca8bf, 0x7b2416e835e6fc29, 0x5f8cead395e2ba67,
    0xfdaecb87bdeca8f9, 0x5d8bae6f4e7b861f, 0x3f1d2ae953164b87, 0xda5726bfef8d9ab5,
    0x93751baeaf2b734d, 0x8ba7edc6b1c4ed75, 0x172543964ef861d3, 0x5cfa78192ab64ce1,
    0x281c6f9efed2b1a9, 0xd6845eb25b82d6a3, 0x2d84715b4e8c15a9, 0xb3e1a475489f1263,
    0xdacbe28787b6e295, 0x28613ca5827f5e49, 0xf956c1ae52ae4c6f, 0xf8b96e7af864732d,
    0x6d5a14ef2761e8b5, 0x32fda76178d9e145, 0xfeb91dc4358dcfe9, 0x2348eb6a84f7ec1d,
    0x53c9f6e83fd87415, 0x38abe127ebc856d7, 0x1bc4e23562c4f9e5, 0x4e7bc12abf9ea26d,
    0xd73456fbe89746f3, 0x1ba93ecf7a934b81, 0x74159de2d48e3c5f, 0xf8a346e75293fa7b,
    0xc891342e9481cb37, 0xed4261a3c2fb8a15, 0x94be51d6b4a37869, 0x8c5fa49be6c38a15,
    0x6d234851ed4b8c15, 0xdbc2e418a69321c5, 0x5987d1ae2c4e35bf, 0xd72eb61a81f4a693,
    0x3a672ebcfb9ed865, 0x91f87bc2f73adb65, 0xc491da581cd6e293, 0xa1c65e89cbea973f,
    0xf81b2c7649cbd1f3, 0xb18c5ad96ef7bd29, 0x64219ae5e9723dc1, 0x5cb4297e26c7f981,
    0x3d9a2ef5a19d2c35, 0x46fb1a5278e1a2cb, 0xfca726bec1e7a29f, 0x4ac63f5145debf93,
    0x29ceab53df538241, 0x23afcdb9b4d61529, 0x18f2964eb9ad78ef, 0x21b675d3485f796b,
    0xab1872d4fc2bade3, 0xde89213f7ead389b, 0x37c19d62f35682e7, 0xbfca362ecea1826b,
    0x2c8f9bde78ecf641, 0x19f478e527fab9c5, 0xe83127c5afc7db95, 0x6b8f372e486b92ed,
    0x391782ae1b4c76a3, 0xac3d4267bd9163e5, 0x9beca378715a86bd, 0x45db61af4de27b8f,
    0x2f7b14352ed73ba5, 0x7f238ab9b37514ed, 0x7b34da8ed81e97f3, 0x1369cd245f849d31,
    0x8b793adfa7893b2d, 0xa23b417d4a96bd7f, 0xc762b3fdaeb587c1, 0x3d519f6495763ca1,
    0x7c1a82639f7dc34b, 0x81d94a65cf7d25b1, 0xde81467f2ba5e481, 0x283a975d21d9b367,
    0x5dc96a7f241e987b, 0x4593bd1a47b8ca95, 0xed32c9814b57a9cf, 0x4513eda61389cba5,
    0x4afed1bc6f94ad27, 0x3a24bc68fcb9d8a1, 0x47f9a3db36ebfd75, 0xceba81678f3651ed,
    0x3b679528693fc451, 0x17ce82b67d542891, 0x6cd1f539a68e3b17, 0xd8471ea36e12d597,
    0xdfb3c4eafd6b8315, 0x5c864d395dfa37e1, 0xfc327b4835a6f24d, 0x7241b6386ce97b51,
    0x4eda82359fc875b3, 0x5a9ed17feca3168f, 0x4c8976fa642ec9a1, 0x26acb8e18dac7419,
    0xb47cfd685fcade4b, 0xeb5a328c72f48be1, 0x63d4718a7c6bf429, 0xdc643215c3568ed1,
    0xfe83d1ba3fde9715, 0x47a9365d2dc897e1, 0x37cf8d921eac4769, 0x2dc63ae9345a289d,
    0x45b6de2a2adc659b, 0x8b7c42debd4672e3, 0x59c1bef8cbf3a591, 0x4286b195b3281df5,
    0xf2a83ceb4d6c8915, 0xabfdec19b8564fc3, 0xf4d69c53a13d4259, 0xa1bef89dfb264e3d,
    0x61e2859471a86c4f, 0x549dcf21c1b76e5f, 0xf7a831ec832a457d, 0x1d9f826b7bd39cef,
    0xabdf3158b32951e7, 0x183fdc693ef6bcd9, 0xe3758d6f7e2adc83, 0xb18cf37248bd6217,
    0x6fac58793f59c62b, 0xef89a645b6987dc1, 0xdc381b952f481b93, 0xc325a46d7fe69d51,
    0xd8ac157f128af95d, 0xdc29bae478e12ad3, 0x749dc5f2bf5947d3, 0xfca1457b83e52941,
    0xadb64271c7e184bd, 0x987beca6a68ce7b3, 0x71f2edcae31d2c49, 0x928e71c535276fab,
    0xcdf2a548e9246c3b, 0x6f59d87ef6954ab3, 0x2a7d49fbfb2ae9c5, 0x5c1b9d37572fb6ed,
    0x3e58712d5483dbc9, 0xc8b7a52fe62a4db1, 0xa98d2b5e35a29841, 0x8d95c314ac9bf7d1,
    0xb7f614989317de6b, 0x93ed16a525649ec1, 0x23f94dac26d341ab, 0xeba4cf838a7452e9,
    0xe291657adc2b4ea7, 0x4ad53e76e2b69f53, 0xb267c45f8a31dbef, 0xf249dea594c3f28b,
    0x6bc85efa4ed31f89, 0x237f1c9e7eda8f59, 0x27d9c5ab63781f9d, 0x8d13fcae354ca167,
    0xf4823bae9213645d, 0x4217af89daf72349, 0xd64cb179243e6c17, 0xda9f5e8394cdae63,
    0x79a4f31c5c2eba79, 0x58af6e1dc8a45729, 0x96c345a1f5c7d381, 0x1c42d3a98d17ae5f,
    0xc8b63129c371de69, 0xa37684c18b6ace51, 0xe129547c3124bfd9, 0x4fc28eba17356ecb,
    0x39abfc51abe94835, 0xd1467e234ae93621, 0x21ef3a5b8c173d6f, 0xe6b7fa3d7f8c563d,
    0x8afd5c2e65b28e1d, 0x96f2cba86a7b3f95, 0x36c9d28726748baf, 0x3f51d98b89bde417,
    0x1943f52d23eb68a5, 0x271cbf534b8261d3, 0x1582bd9c86bce1f7, 0x129a43b784126ce5,
    0xafd48cb5deb1a687, 0xefa13b682587b69d, 0x8c246be3cb82459f, 0x92f57a34672bd581,
    0xb95321d4a97d31ef, 0xa54f72e8a514db37, 0x428d1b7f23f147e9, 0x27e568c4c58b629f,
    0x53ac87198ed54673, 0xefb8d247e6afcd27, 0xc2d4e856d2fac947, 0x4bec238f9fda61c5,
    0x637ed5b2a5bc26e7, 0x71bc26d41c24d9e3, 0xca86d79127f98a6d, 0xe28c13bd924a157d,
    0xdb5876ef326b8f4d, 0x7c6f53ba712a4e69, 0xb28e513c52bd9f13, 0x921386ec7bfa6213,
    0x9c37fe267a13ce5d, 0xe96a2dfc58972c41, 0xd475916c6a1b492d, 0xc7f685938e1a6b7d,
    0x1294ad73154fb927, 0xc1ed8af9a3584f6b, 0x78f54326ef815b79, 0x6b42fe59b5de46f7,
    0x792befa685479263, 0x42f95ad6be54df91, 0xa7e8291bd5b63149, 0x654b7af9342b5e1f,
    0x2597fe3ba4e937cf, 0x21ca7ebf32c8e49b, 0x9c2d3456c126ea8f, 0x168e9f534981d25f,
    0x9e587b2185712cbd, 0xbed36a7c15e3d649, 0x2a54163942613fcd, 0x68a3befd8271dbaf,
    0x6de8349aed26571f, 0x4eda2579e398c47b, 0x16dbc53fc762ba83, 0xf96143ce825ad6fb,
    0x5a49ec182ef9ca83, 0x91f2ced8532a8e91, 0xd1c7e239e4a96327, 0x48a3d619a6d71b53,
    0x6d9a1bec452a8713, 0x5e4a7c9d8ef4bcd9, 0x38df9476a5cfe637, 0xb9f3a7c86cbea34f,
    0xd6fecb4547fbe1d9, 0xd564ecb3f42adb51, 0x7c54edb6eb318245, 0xd2359fc7486c5ba9,
    0x7a3942f8a2695341, 0xd2b6e3c7318abd97, 0xba26f3492e694b7d, 0x32dcb9e769e25fd3,
    0x8dfea6c3289156cb, 0x12f89c672e7d5f9b, 0x1265973efc618d7b, 0xbd654a7c261c7ba3,
    0x4978b2afda2b8f31, 0x3ab421d57a5f431d, 0x372a4cd82ba854c1, 0x258cf693f1a96d5b,
    0x34826cebc6e7843b, 0x69f5d13ce9387d25, 0x6e294a15e3765c9f, 0xa4712ed9c8a4fbd3,
    0x34edc72fe2a563bd, 0x3f5a96eba81cf729, 0x92adb5382a7dbe31, 0xecf491db542d9f3b,
    0x3814d6e93c91f287, 0xb629e4acba6dc473, 0xf67198bda8b4d23f, 0xc96bf81513842afb,
    0x1b6d4f2af547b829, 0x13ce8467f7b625ad, 0x3a1987526743d5a1, 0xb6543fdaf69835b1,
    0xe1f8b43ace79a823, 0x1fbe6a27943fda17, 0xc84b56ad2b8147c5, 0x2f8de63ca45b9123,
    0xc3da7695c3e97821, 0x4a9d82739c3ab627, 0x1246af8c79481efd, 0x7cb39d1f8649fae3,
    0xd6bf58c25e2dcb6f, 0xd7368912d1843765, 0x1b79c6d3563c9b1d, 0x1fb395484c1e7d2b,
    0xf2bd86a9f6c528a3, 0x1fbe69ca1c48abfd, 0x346298dcd32a5681, 0x3a82fe96c47be31d,
    0xab4fe79ca9c2b64d, 0x34a1bf5e69fe73a5, 0xe765d89f2b946a8d, 0x823df61e5c62a4e7,
    0x41ad3fe94b2edc81, 0x129b5f7e64f28a75, 0x275c36f4ef76abc5, 0x41796a3b3d286b91,
    0xbf17632a89165f23, 0x8943a57eb8ea79d5, 0x625a4c9756e7f8b1, 0x18cf3a6b7bdea45f,
    0xd394c1b8a35b8649, 0x7bf23581ad7f4c89, 0xa6cb3e241a5d2e67, 0x65e4cb129ea4f67d,
    0xd15cf982b351e6ad, 0x982d6e54f72c91b5, 0xdb173f4e2c4ab891, 0x3bcea5f1c4213f6d,
    0x59d236f1378a219b, 0x9d27f3b8231fcab9, 0x78f2c9147a2d35c9, 0x517892a3cfe2d5b3,
    0x748d3ba2f1923c7d, 0xdebf789132a916bf, 0x7d965b1cad68e2b9, 0x49adb87f9765ed8b,
    0xcf71db65c35a4edb, 0x87f4e92b1498b3cf, 0xd5a63c1958be7c61, 0x7e6892fbfd6ac7e5,
    0xa7df185b814c623f, 0x7f94d65e21a7ef6b, 0xa391e58d3cf5de27, 0x27acfd64516c843f,
    0x52a364fcfdea7841, 0xb5e62c81c6e2a7b3, 0xe38912f53f6b4ac9, 0x2de89ac43a5f8de7,
    0xe3c48617fcd73429, 0x3ce74d8aea589d61, 0xd7f18bae6ca8b4e5, 0xb2a46f3ca76cdeb3,
    0xca82943be24c89f3, 0x197a348be8214bfd, 0x93f2ec65821d4e9f, 0x875f32cae8a2b745,
    0xdc193a4e6e5324f1, 0x5d3cea294ef7c695, 0xfa15dce87319cb2f, 0x8b124957175c436d,
    0xbc4edf159a6824c1, 0x9fe1a4b3231fc7eb, 0xe6791fb4f789b5d3, 0x854a1c39621cb8fd,
    0xc13df764c98be513, 0x2fb8d146ec6f4871, 0x2d931eba7b2913e5, 0x84e579f264fdbc25,
    0x8ce5764383a7c15b, 0x6b4df3a2469285c3, 0x789de6ba1f7835eb, 0x928b6c7df7a6e931,
    0x81b29a7fa78fd953, 0x69b1cde3dce6b237, 0xf89743ac62a8b9d3, 0x132d8bf4d1f3b4e7,
    0x6cb53a729b4e5dc1, 0x2b5f4ea368173bef, 0x456a2d834318c5db, 0x4c17683da7b5f8d1,
    0xbe14f93519a4cd7b, 0xaf917246e2f64b85, 0x35c1e4267cd21a6b, 0xe672a931ca1637f9,
    0x24de3a8532cf1a49, 0x59c6ea8f4be7f581, 0xe41db2f3e1f2a68d, 0xeb82d3496b17a3f5,
    0x73f61894af2e3bd5, 0xe5a341c2af9dce61, 0x4587d613d9b64f73, 0xd8f7bc5e59c4eabf,
    0xfd953b2cb4ed62f5, 0x4a218cb9f79c6aed, 0x58dacbe4aef6bc7d, 0x27d5f381c27418a3,
    0x9e3c4fd8c427e3b5, 0xdea3752b97a5f4d3, 0xa41562fec56e83b1, 0x8f537c42e46fc51b,
    0xf3e79b241d4c98e5, 0x1ae3746c57f24961, 0xfc249e8b943e72b5, 0xbc47196847cb93ed,
    0xb6587d91652abd91, 0x85971ecab4f172c9, 0x2fc96be152cfed79, 0x6af183c5a15d67cf,
    0x63bce91d82feb3d5, 0x9ef4c6a7c674aebf, 0xe9ab4c2f786fc91d, 0x9a41c8536a753fe9,
    0xe6fd2897a468d95f, 0x318546adc84f179b, 0x342518d9c71e54a9, 0x19c2d78fa7d9431f,
    0x7e165289cb97584d, 0xc1be6873f9a158bd, 0x5b1ce824249fca7b, 0x48326ecb95cae7d1,
    0x2da6497fe812673f, 0xba3c5692d496b7c3, 0x685dab4c4af7cb6d, 0xa7edf126d5748ce9,
    0xcb51d873475ae12f, 0x84bd7159a3cb7945, 0x257cabe87c29b6f5, 0x964fb87268fc514d,
    0xaf3194e836125ead, 0xd6a1b2735496ab1f, 0xa8791432ab3c6291, 0xa4f2538163f7d8c9,
    0x8a92b51ca2bf578d, 0x86e4f3db4a6bd213, 0x23c46b8ae1f489bd, 0xe645837c9f48b261,
    0x8f91d4575d3f6719, 0xa9c6f2b52347fc51, 0xd97134f8946ea58b, 0x83f25d1c8c96db31,
    0x7584cead6ba7953f, 0x416c385fc3f6e7d5, 0x5d2b8f1c7cad13f5, 0xd1e8b57a675f39ad,
    0x34f26d78cf72e413, 0x4528fc1d532e46f7, 0xa9cb671d28c679a3, 0xd3ba6415fb53ce69,
    0x283451fd1d925b37, 0xed2f9a47a6cfd4b5, 0xc2461fbe4ec5293b, 0xf5d21a97b35d2f71,
    0x73b584ac1ac59d2b, 0xef6bc925639ead7f, 0x76c45a2bdb294f51, 0x745b9126b7ce568f,
    0xb7f2e56a2a834b7d, 0xb7832fe1a9421c37, 0x48e3567cd2817463, 0x723659b15cfa7e23,
    0x5afc948141a2ecf5, 0xf639172bda91e7c5, 0xbd6452371fea583d, 0x8e9bd534cab2f84d,
    0x2761fcad851bf927, 0xa6dc8957e5d438a1, 0x64a19e3c28be7a35, 0x46f8b32c9f6712d5,
    0xc295fa17a2791e65, 0x84c61dba54e8f23d, 0xbc24173d13726ba5, 0x6d4178c5b426afc9,
    0x7ad328eb3a6142eb, 0xe9584d6bda8bc57f, 0x6715bca2532dc6a7, 0x8f6b4d293afec241,
    0xb5e9fcd1a6b549e1, 0xb687ad1592da46c5, 0xb536e1243894f1d7, 0x83271ac5c8f2543d,
    0x2cdb48932da6b37f, 0x34a8d71b5f6c2b49, 0x2c14963feb732c5d, 0x741ef52c4b58a6cd,
    0x9c75d216ef7a23b9, 0xa5298dc3ac1b2d45, 0x6192c3b5a254bed7, 0x7b48ec2fc21fa739,
    0x2847ec56e86b4ca3, 0x93b8e256fc93264b, 0x4e9ad7bfdc247395, 0x78e51bc92d6f358b,
    0xca6e2143d94fab15, 0xa73f4d1576f4e521, 0xe389f45a982a7feb, 0x16a945dca52d6983,
    0x7defca1bd7f24a89, 0x453cb8f13bcf4167, 0x5c4b169f61e7c439, 0x2486e1db921385f7,
    0x13ce689a5bf783e9, 0x2713edb65efc3a89, 0x8371edb2d5198eab, 0x316a9854921ce37b,
    0x92f8b51ab2796a4f, 0xca9b63279b28c5d7, 0x9c68571f968c3521, 0xbdf128c67f4a36d9,
    0x3e95ab175ae79c1f, 0x41695a3b4ea673c1, 0xd72e1fc8f6a87b91, 0x2485fa398d7c2ae9,
    0x48a13f6d94f85ec1, 0xed9f48a54f6e2c31, 0x8fcd295b812c4fe5, 0xfa35912e42a7eb1d,
    0xf972b1a43ce9a421, 0xb293584c95ea7c1b, 0xe5d3418c64cead9b, 0xd65348ecdc31452b,
    0x9f13e25635cd6729, 0xc2db17e9efd6a7c3, 0x1e95f74a7beca3f1, 0xa3b9685f2f94c3e1,
    0xc73216faeb82c4a5, 0x36fe1d5a75b86a9f, 0x164bf5e8ad916e3b, 0xdf419b383cba78fd,
    0x2b13896d139de547, 0x7f9c38dba698cb4f, 0x973ef2c49be1cf5d, 0xba5163ded6a783bf,
    0x47c8e251f689d325, 0xc3e5846185d2be31, 0x9ad3c47f478cae5f, 0xdf62794af438dc79,
    0xa6e2d538a4f8196b, 0x4c9a28db72be5fd3, 0xdfa2bce37ed46c3b, 0xcabf65493ad69857,
    0xfcd2834141a3b897, 0x62f893ce18e327d5, 0xe6a234cb6c357d29, 0xa953e182d7c4f1a9,
    0xf3e7d152af4e5c6d, 0xbad3cef87a54b123, 0xf534d6ebe38956a7, 0x138ab76421a6ef53,
    0x3475d98ce9dc8abf, 0xb578f1dc3789aed1, 0x78ad3c51fe34da25, 0xeb5234d7c74f1529,
    0xa1c8e9f7ce4fd195, 0xa6cb1479b7a5fd19, 0x765b8eacef349627, 0x7ea4593dab2fe547,
    0xf4d8937c5e1c693b, 0x3f5ce2d7892f6be7, 0x4f19d68c3c8a1947, 0x3275c69e12ab75fd,
    0xb9f7da81facd3be7, 0x23c71e4f68efdc53, 0xa35794c124ce897d, 0xf4281c3a46fdbec9,
    0x3f86adb27ce9d241, 0xfa853674fe96b831, 0x2fd351e8bd92a43f, 0xf71b49da2861c3eb,
    0x1a89efcda2631cfd, 0x1d253fa95e48a36d, 0x2e698abf6bca9fd3, 0x9724c685efc61b37,
    0x87e4c9fdfd56bc43, 0x594d36e1458b9f37, 0x1d45a37c238d5e7b, 0x5743bda6db864e97,
    0x17c89af532a194e7, 0x471e526fc548972b, 0x82513d7e983af12b, 0x7bdf45e81e3497fd,
    0x9712f583892c3f15, 0xb2ad68713ce1a8fd, 0xd1643fec27eb9c41, 0xd196a42ea3649c5b,
    0x1e926b5a72b864a9, 0xf257acd4ba83c1f7, 0xf546a3dbd3eac765, 0xfabd21e7186fa7e3,
    0xda64f8c973612b9f, 0x9ef67a58e754f381, 0x371b5a9c963157fb, 0xa376cb2d123ab769,
    0x8e2674cb5de3c7b9, 0x1afc6b32b483d279, 0x42e56fc3521bdfc3, 0x8ad43f79372d9bc5,
    0xd9c63872742df153, 0x5d3b7fe1bea627c9, 0xf15b87da48e126d5, 0xd571ea891ca5f97b,
    0xd815acf39c24e65f, 0xb6382eac6a1d293b, 0xf1cd9432bd1e8a75, 0xa41dc76ed3b6a41f,
    0xcef4dba1d5b13ec7, 0x8a3c2d96c9fa18b7, 0x236e98c7e8f24dc1, 0xc74d1b2584b5c97f,
    0x9a38d4c13abc5f69, 0xf14a6729b819ce73, 0xcedb2546295c8adf, 0xe7d62b9aca647fdb,
    0x2e87bc46c279da83, 0xe5c6783becd8412b, 0xb5e716a852ef37bd, 0xbd6f82a7912b56cd,
    0xf897a3428ac29f47, 0xa4c35d7bf98ca461, 0x4c1af89293ba168d, 0x428b197dce6f8259,
    0x7fc51ad2af37e8b5, 0xc74d6f354f37e965, 0x31af6d2ec274f861, 0x5c486de168cf2bd1,
    0xc87d69138f732cb9, 0x65b23e4f9624f381, 0xc8fe5741a14b982d, 0xdb276f91b89a2ec3,
    0x89324abd17d9ea85, 0x1bf9a2d8963845bf, 0xa4128bc9c65a12eb, 0xf68b53d14ab96f81,
    0xc3462da75f173a6b, 0xc7b15ef8aef174d5, 0xef385bc4a72c5183, 0x9f5da237852b3ec7,
    0x7ebac65fdc9a35b7, 0x4587ad1ebe6f2ca5, 0x8ba5749d89efad67, 0xd38f74294f296b31,
    0x583d9467569c74e1, 0xca5d134efd4891a5, 0xbf9e3754528c4671, 0x2531f69b91eadc85,
    0x92ed683a349f6ea1, 0xfe57cd81d23cb8e1, 0xeca4716d3af4c8bd, 0xb52fc3a6e5129cbf,
    0x29c78be1d9b34e5f, 0xc765d2fe35b49ef1, 0x42c76adfda28e975, 0x89f532e183594d2f,
    0xecf13d86edbfc359, 0xfecb15d6975b621d, 0xbd6eaf4898cd2537, 0x4b362758afd5c849,
    0x1ad84bec164c7f9b, 0x64de51f9e698d3f1, 0xd5b34af7b652e48f, 0xf274ecb392ab4e63,
    0xc83b42a191ec2843, 0xde754c12e8746ba9, 0x495d27b6e4bd97a1, 0x26b8a419ac72918f,
    0xc71698be598e7fc1, 0xd3496718158a7de9, 0xeb892135a7b5e389, 0xf68d1e2bec67a149,
    0x8b35672a5c93768f, 0x583b1e4a3c5f98db, 0xd96e84bc897b4af1, 0x97d436b8168243b9,
    0x6cb231f515d4837b, 0xb593efa7973e28fd, 0xeba83cd6b2a594e3, 0xf24b3dea8fce2ad3,
    0x831daf9c984fd317, 0xf95d46781564a38f, 0x3cae179462d1ca39, 0xf7c8bd4549d8aeb5,
    0x18af27edc4a28e31, 0xb72c1693b83ce7af, 0xc35fa278fe5413d9, 0x953e1bc473f645b9,
    0x657dc39a7aebdcf5, 0x647f3a52b8725963, 0x2de7c8393684b7ed, 0xe1f825431572bfa3,
    0xf13672b4a3e7b2cf, 0x26e5c8d458b4dae9, 0xa9e5382dfe4152d7, 0xdc579f8b6c758fe9,
    0xa2b3c6f5742a395d, 0xd8254a1cabf2e849, 0xab261d8e9b34126d, 0x2b3547a8dbfc2149,
    0xea43b7d53d67cf19, 0x86adbef36975cadb, 0x953ce2a1c94aeb83, 0xdca5b824cfa9352b,
    0xdc54ba23ce3d287f, 0x25daf78cf5c31d67, 0x7a42de8fa2c38197, 0x92bfc16acb1f2485,
    0x9d15f7bec1f6537b, 0xe63af7c4db9e46f1, 0x3a42de7ca1ecb94f, 0xf4136c7eb98fe761,
    0x9b1c8576d3c8e295, 0x539fd68a7e9c63af, 0xa1c2b7d3b137d25f, 0x8e793c4f62458d79,
    0x1fd57384c93be4fd, 0xc3956f721fed5693, 0x4d97b8fe4d72cfeb, 0xe16b2c8f432acd5f,
    0x5bd19f4e6efd48a9, 0x5de6bf8c3c458a29, 0x293de78ce3f2dcb5, 0x291d4eac8f2b75ad,
    0x7bce43f964de2987, 0x83594d7e21af47eb, 0x647bf5189c6eb7d3, 0x1c437e989c823abd,
    0x294d7fb1bf97de21, 0x46cf28a3f2478d63, 0x198234ed946bdc87, 0x8b31f5a286fac7b1,
    0x19ac87ebca3156e9, 0xf5872a1b3a7e18cf, 0x2df16eb3574813af, 0x842d35ab682d31c5,
    0x381be942b6c75329, 0x8af37659b325d6af, 0x694e1fc5157ea49d, 0x4316ade2dbfc4185,
    0xe6a7dcb5a9f1d683, 0x753f42d82e18dac9, 0x86a574cfabe74cf5, 0xe2d618c54b198ef7,
    0xc235bd472bcfde53, 0x46af27e83c6abd71, 0xb486719fd356ae29, 0xf6db24e8c56fa37b,
    0x365281cea8ce7f2d, 0xbc35d9f18b6e32cf, 0x13694cf7ac759d1f, 0x5f87ad39192d3ac7,
    0x8bc2746ea385fb67, 0x4e93b81a2afb9c65, 0x6759d1a8c179235b, 0x3f8294e65da4376f,
    0x85a47cfdeb2153c9, 0x162a7df937cb8fa5, 0x5cd6fa13a481d5b7, 0xb96f42d56fbc3217,
    0xf47e5ca2c4aed2b5, 0xf9b152a42d1f4e73, 0x19bfd347ef7b69d5, 0xf43ed725872ad963,
    0xe7648da275329f41, 0xac691b4f4e93bd75, 0x369a45e726c354a7, 0x7df6a95cdebca927,
    0x2c5a698f1dcb43f5, 0x6afe31b8b9362ac1, 0xfc93b6513b2fad15, 0xf7d83b21926c473d,
    0xf28de4a7f935b7cd, 0x4b6e239d12f6b875, 0x372158aec94278bf, 0x5e217489ef3678a5,
    0x317bef9d79215df3, 0x86de27f4e8962f5b, 0x948c5ad768a12cf9, 0xe8f59bd453ce28db,
    0xb912c5fea6c9e417, 0x61a54cd2ac52b167, 0xdfab4653c8d746b5, 0x5d4628cabcf75d81,
    0xbf6473ec5164d379, 0xfce2947513c5492d, 0xa2547d9e645e9dc3, 0x5e7d14f9b473215f,
    0xfd4715398ae63fc1, 0xdf12587a126e84d9, 0x4a31562bc1e32fa5, 0xe9c52b4a52cd13f9,
    0xc14f3ea82ec365b1, 0xeb2dc5681ac72e39, 0x8fc39d7a4568edfb, 0x95ebd6234f7ac35d,
    0xfab3917653ba2ed7, 0x4d1e56a8568da2b3, 0xa763e92c6cb5f419, 0xbe9327a457ca6ef1,
    0xbd14879ce751bd29, 0xda5cb7f1d2e17abf, 0x691e52a427b453ad, 0x9a3d5ef87ba15def,
    0x2347d69829718b65, 0xec59138748f3cb51, 0xbc85de2984e9d761, 0xc19b62f78bef437d,
    0x914357fd2fb93da1, 0x421583d67625eca3, 0x53126c4a56489cf3, 0x7936ced162a4e39f,
    0x2f9b16d8b9842c37, 0x6438cbe7345d9ca7, 0x8be2cd71cea6294f, 0x56ba1c8d4a9c571f,
    0x352bda6fb4ae6875, 0x42a18e6928341db7, 0xa3627fce5e2b7a93, 0x4278cebfb164597d,
    0x31dafe7b674135cb, 0x492bd1f8a3b81c75, 0xd8fa672486e523bd, 0xe7b3481dcd3264a1,
    0xf8a37ed24c32afe5, 0x9e8ac2418fe4c267, 0xeac25f8359fa7823, 0x1acd296b2913baef,
    0xeac8fd9579a16ecf, 0xb2f38d6c45fcba97, 0x2cf1597a165ca7eb, 0x9a61bfd494c162a7,
    0x25a43ed6e34c85f9, 0xe97f31c46b218fc9, 0x8b127acdfdac315b, 0x5fbcde39ecbf4567,
    0x6ef5391c89ef1d2b, 0xfc71d269ac1f6327, 0x5d6389fb524c9f7d, 0xf5ac6e3de4bc8a3f,
    0xf97d83ba8921af65, 0xe5a963b8651a3429, 0x5eb468d3654f2ca3, 0xd91a35e82486cea3,
    0xbd94c7e294dabe25, 0xe145c6dfb95ea13f, 0x3d694cfb932ebfa5, 0xacfd48b3c52e9613,
    0x9de6fb2c48d6c9e1, 0x2cfb94d1763ebdc5, 0x7a2dc645e48cd391, 0xb642513ac2ae9437,
    0xf4ce52ba91fc67e5, 0x5d3a71f42145a63f, 0xaf547cb919e7465b, 0x6dc28f9ead28fe13,
    0x438e12754132c7f9, 0x36a9be146a24ce13, 0x2caf7d3b6abe8417, 0x9fd23e6c249b758f,
    0xb5e2d67a329ebd71, 0x782459fbd7b5f391, 0x53a9127c4e8b96cf, 0xfae298d64de681bf,
    0x43652e8f6e1548c3, 0x5e8ad39b75fc394b, 0xfe2b3458abf2d469, 0x397acb2ea1b43c65,
    0x12f96a4b98ac15ed, 0x9a758fc149651e7f, 0x5d48f61e2547aef3, 0xc9d32456a3e15f8d,
    0x4ebd6a3fc63e1bfd, 0xba14635c25e169cb, 0x582ba764d2154b93, 0x3f947e8c86dcfe93,
    0x65cf4ba76da539f7, 0x915ba7cec43f1867, 0x94b631deb15c934f, 0xc2184fe325b74c93,
    0x8bf241ae3b4a7c9f, 0x124ef9671b27ce9f, 0x9db35687cbf21487, 0xf21486ce3e284d9f,
    0xec2a31bfd9f6845b, 0x8e71459d823df4a9, 0x3a247f9c48b193c5, 0xd5263fa7ab9415ed,
    0xd569b183a16f5c29, 0x9ab68e435cb6d21f, 0x95abe3f14e3b1d6f, 0xdb75e894e4283769,
    0x1d5728b9518f32e7, 0x92437dec8bad9f47, 0xc29bd81f21cdbe7f, 0x4963a17e25fcd6eb,
    0x45e6382c84d3b6a7, 0x4586ef7253947bcd, 0x72cab6e935e2f8db, 0xba56e384689452f1,
    0xb7516f8962f38a4d, 0xd6e3714ced6754a3, 0xc7943a168a9162f3, 0x218f3e57ea762df9,
    0xe75b38cfa278c43f, 0x1a9ce87f3c984761, 0x6dfc85b15c7e416f, 0x3ad9ce283879dca5,
    0x927e6fb548ce6bf5, 0x8fcea73d38acd97f, 0x921bcdf85b281dcf, 0x1ed6cb4594e61f53,
    0xb924d13f235a19eb, 0x93852e6d96cbd8a5, 0x27abd6f5f13e2dcb, 0x6583bd72d21cb745,
    0x5f3e64783fd12c87, 0x8d921ef38a769cbf, 0xc13a624845ab291d, 0x7a468d513849efb7,
    0xfd745b38ef13c84d, 0x6374cba2d74821ab, 0x5ce83fa6d9a14263, 0x31e46abdef8d6941,
    0xbca35e41b79ef563, 0x348ac6df27b43e8d, 0x3f67c9a161289b53, 0x2e6913bd7694adeb,
    0x5a68eb714a9bcf53, 0x6472de534a2c1f85, 0xe214f5bdea9536cf, 0xf28b4d75c6439adf,
    0x7e6581db6847935b, 0xb54e93cabda849c1, 0xd5319c42174f2c83, 0x57d439ec63d4fc8b,
    0x217934acae6d421b, 0x612a9748a16e49bf, 0xc3e48d9ba431c629, 0x8b3d4a52a9ed1c4b,
    0x7931c4be92b5d1e7, 0x41fc25692cd7fe15, 0x962b53ecba681de5, 0x65f8271cf2e8d157,
    0xce93bf4a324db875, 0xb84973ca687dc93f, 0xafc15d69bc8a234d, 0x3de2ac1825647b31,
    0xfbe285a3d2e1cf97, 0xe36fd154fc168359, 0x9ba827ce64f7db91, 0x4c61af2ed6385217,
    0x1c4b36ad5d2f8e71, 0x38625b7f5ce62749, 0xf489c756c97ae843, 0x41f96c8df1ea926b,
    0x692f5bce32516c7d, 0x1bd729fa89a5fe13, 0x12d465cf4659b1ad, 0x15f7ace368c9fb45,
    0x5e6dc18351e9723b, 0x6975cd31258da347, 0x32ef9ab1a174b93f, 0x16a5739e5367a9fd,
    0xec1b826fba8273f5, 0x16dc835f2c4a5de3, 0x5b3a2896564897ef, 0x3658e4a2af82b317,
    0xc659e4d27d41a8eb, 0x8b917ea318c95623, 0x5894ace24691fa53, 0x8f1972bdae48f691,
    0xbc9e7f63531dbef7, 0x914a52867415de23, 0x124b9eafd89a364b, 0x29fb6d8493cd54ab,
    0x2ba3cde949e82bcf, 0x8921cd4fe925b63f, 0x213e59ac1e3ab56f, 0x1536bd7a254c9b37,
    0xa438d5febc21859f, 0xfadc89648c3edba9, 0x49ef51c21c58fbe7, 0x2db8e5c9a45e8db9,
    0xeb5d29a71bc29fa7, 0x7384a6d547231f8b, 0xd6e7c825f1a6bd73, 0x85b4d739569fb341,
    0xcae29b4148acd6e9, 0x87e2a6fb91a7c58f, 0xdf59478e8ad9154b, 0xb7df639512dce5bf,
    0xa64b2d71291576af, 0xa6d57c9eb249cef1, 0x9cafb8619e63af8d, 0x1857c3fde7d19465,
    0xcefa5d6b4df2ce67, 0x7d48e5c6e6a18243, 0x6f3a79edf6e25cd1, 0xbf4a1395d6385927,
    0x5f931be723f7a169, 0x5a3bc4df5f2dec1b, 0xd4953eaf3169daf7, 0xb6f3ec9282dac51f,
    0x2b4695d12bfe5cd1, 0x5f7e89416c8db57f, 0x6eb23fa1b96d1453, 0x94ad815eb6e57219,
    0x768cf42b38b4e217, 0x2cbd749e618bd395, 0x28fc65313425db1f, 0x147e23bd4ce3b861,
    0xc4a517e9472ec539, 0x4fa8d2ec93c7856d, 0x4792da68451ac8eb, 0x398a4bef7f8b1c59,
    0x58f7be94864e7cf5, 0xb973c28d3197f56b, 0xc1b6f8579a7d8b43, 0x8ad4f312bd8a9275,
    0xc74e21a8e78f2563, 0x65ab8fc9192f6cd5, 0x3862741a2ed4ac87, 0x8d4cf936f1a6278d,
    0xd5f4e813eb28c43f, 0xc4fe2719c32b9a47, 0xb265f7c1e695c7fd, 0x78e96c3589e7cb6f,
    0x784e6d9a6ab9de87, 0xd24519c67a9c6e85, 0x3b7e85217e618b4f, 0xa796f1deb5c692e1,
    0x8394cf2b5cfed67b, 0x4cd72fe9c254b9df, 0x78ce26149ea1f7bd, 0x7453b92821e5863d,
    0x1ab3d89cd57a6e39, 0x9352bfe1956cb431, 0xe27568f39c7b32a5, 0xefa6bcd24a29758b,
    0x3a9d65f4a8f14c95, 0x98d327654b158239, 0xa364e8792f67493d, 0xfbadc4674786d523,
    0x43d6fc75c2d918a5, 0xf16eabc5756e29f1, 0xe81bc92fa82d7cf3, 0xbdc6523159eb2681,
    0x93cba2f4da167459, 0x7f6ca951d752341b, 0x9831d4c5cb648f91, 0x6ead73497c8bd413,
    0x4e3681a7c67e24ab, 0xa54b9de83472cb61, 0xc752a1d6b841a653, 0xb89f432afce743bd,
    0x17f638d5e3489127, 0xea4fc2d5821e6c35, 0xa721eb987f4b1a85, 0x61785c4bd9a4ef7b,
    0xc27689d32bc91563, 0x26ecb4386d13279f, 0xdcb5a1274518f79d, 0xf2671b5dcebd2457,
    0x4136e57a7b851cf9, 0xaf327d9691a6748b, 0x1de4a6b5a95b8241, 0xfdae293be315294d,
    0xf42ea65b52cdfa7b, 0xeb5c279152b8c3e9, 0x61a3dec5f9bce8a3, 0x8adc97234281a9d5,
    0xe4cd61b565b24ae7, 0xe9c34f12a742cd61, 0x1aedc42925bc7e4d, 0xb712dc496fc1b423,
    0x64b813d7a953f17b, 0x2698af1e9c483a7d, 0x9f67d85267f1b8d9, 0x9d38b156ed964287,
    0x1e48f39b8ed45a69, 0x756fba38adf259e3, 0x58a491f7e1a2b5fd, 0xb8f513d6839746bd,
    0xd7892bcfec362a97, 0x86719b3e4d82f6a7, 0x9c3fa12d2cb174fd, 0x5d39a7c2a8ef613d,
    0xf4bec6792fe581bd, 0xe9754c861f3eb265, 0xb947ec63b7cde891, 0x7f1e56d84283fa57,
    0x316f58eab7c98461, 0x3ec8741dae75186b, 0x29436f171fd29c57, 0x9df187e21d82c4b3,
    0x9586dbf42a4f8e63, 0xe32c8f9da3561f49, 0xf681ce34a381e6cd, 0xe83cb7494da67c5b,
    0x8326d1c756f3d819, 0x9456d3a26154ab79, 0x2b148c7fc716a935, 0x58deb3242a71fc89,
    0xe8754126d42cab17, 0xafb5d3916a7ed421, 0xa79b8ecd6fab9725, 0x7482dfbe6f3c7a49,
    0x28f3ae1b38e92d5f, 0xd9a6b854da48273f, 0xa37681bd2b3569fd, 0x1d3c8f5a79d285f3,
    0x76e8d3a2185d29bf, 0xe69f28cba48c3efb, 0x825a1e6346cb739f, 0x1748b69d293e61a7,
    0xdef6297a976a542d, 0x58d7ef9a8ab2d473, 0x248a6dc526d7a1fb, 0xf8abd3515be21389,
    0x87946e25c63148f5, 0x29be5314375abc61, 0x1c3265b4c2e9d6b7, 0xea8d5413917325cf,
    0xfc81db73a3429e75, 0x5be3469d68b7132f, 0xb5c6f92184a92e7d, 0x62371adf97f3d5ab,
    0xeb9c7683b2ced93f, 0x82cf791dad79b463, 0x9a54b76e9a634217, 0xf27841c937184ced,
    0x6e7b3158c685e3fd, 0xcd5973b19b5281d3, 0x9ecf82a7a2f8e51b, 0x56e42fa9c426b9a3,
    0x6249cd5a73fb8e91, 0x68c97d2f6ea9fd57, 0xed6847fac39a8df7, 0x2bdef7c4be12d9a5,
    0xeaf427dc3cd48ea1, 0x2fa64cb92736d9eb, 0xab812593418fecbd, 0x96124a58a9c6e137,
    0xce4873d58137b2c9, 0xf81e3b26c2ae8bf7, 0xef1679a38c23a7b9, 0x3a4791623b2f1a69,
    0x5c647e1d91f738eb, 0x1279dec45b2c76ad, 0x7a6d94c8624d5fa9, 0x6749dea5a3df1279,
    0xf68e5c94d352fecb, 0x6178dab57128e45f, 0xa3b9e42c985df6a7, 0xba1f27e69b52638d,
    0xc514adb79678a42f, 0xbac43f596874ae1d, 0xf8a45c62175d6c39, 0x3eb8daf931ab467d,
    0xf76514cb46b7285f, 0x27d89f1bc38ea657, 0x64d3859ea1bc6e29, 0x3d78145b943cdbf1,
    0x1fecd74a2b7cae93, 0xdc62584b814ed62b, 0x75f942e1c253d6e9, 0x48e3ca129d568fab,
    0xdab925f469bc82d5, 0xf95e87ca71392c65, 0xd2586f1b73d9518b, 0x938bfcd636a1c78f,
    0x2fd34581a4b67cdf, 0x5f27ed19ad94b23f, 0xc7f53ba297b1cfed, 0x1e26f543e96138f5,
    0xc45fa271d573e8f1, 0x36ebd798d9318645, 0xafc6d547cf167e4d, 0x285e1367d267f389,
    0xdcb921536781efc3, 0x842efd16567beadf, 0x5fa7428d869fa145, 0xa6fb795c9a34c7bf,
    0x5916a78f7f361b29, 0xbda8341eac8e2d15, 0x2b7ed4a95def4a1b, 0x2f89a34747e5ad8b,
    0x2cbe856947f9be3d, 0x71e53f968267ba35, 0x87f2b9da8a35fd69, 0xc5e19f68a1592f8b,
    0xf42ea768147e52a3, 0x274b9815c2d67945, 0x4381ca95b96e52ad, 0xbd29cae51a9c8573,
    0x5782f3147c64539b, 0x3d9a6457bcd2f7a5, 0x78f69c252186b4e9, 0xfaeb7293c6e2731f,
    0x2ec71f9ba625f91d, 0x1eb67cf84e6dc275, 0xb79a64d83127cd6b, 0x9a71cb26ca9f4b51,
    0x5a2b43f169cb752f, 0xafbcd873e749a561, 0x13d7a5b28daec1f5, 0xaebf9785c951f647,
    0x37814df2fe4d7c29, 0x982f5b1c4ce9f183, 0x73421b98a4f69d81, 0xef5d76c93ec68275,
    0xf64e5ab24958f16b, 0x5d4f768e382d1a4b, 0x5e1d429a2b194f3d, 0x4b976e1cf48cbed9,
    0x2a86ef79e76d1283, 0x194fd78cf46a825d, 0xcd842af6a87e2d65, 0x1ba4c396572b36cf,
    0xb163a598c1f56283, 0x198356bc9b7a852d, 0xb641ed7fb5e21dc9, 0x83adcf9e97cfd483,
    0x1dcf35be124db695, 0x5ed9f274dace6341, 0x24586eca7a18ce93, 0x1a25d794b2ef6195,
    0xf45bc327f3d92ba5, 0xba598d4ce5143c97, 0xb948f215fc4783d1, 0x1b7e4c26f64a835d,
    0x6a4259e1edf8ba21, 0x634ebc9242eacb81, 0x7b5ecd6a1bc8a2e3, 0x18764ef36d3a9f47,
    0xba287e9dca79bd65, 0x184675ad4cbf7283, 0xb3c9a8273d16f475, 0x8fbc63d1ad38f479,
    0xa24de593ac827bdf, 0xaf9c761d6d397c2b, 0xda796f8c456ae2f7, 0x2df7613a342dc561,
    0xf28963ead1452ac3, 0x2a714c9f6385dcf9, 0x16a7895bf86ed91b, 0x45dab1c6cbe2a7d3,
    0x2fc61594e38fd159, 0xa61cf7d93ce2986d, 0x193ae6741ea7d863, 0xc62917e8a539bef1,
    0x321af5c6a712fbe5, 0x3d89f5a13ce4f295, 0xd46953e12febd513, 0xb1e34689a23f498b,
    0xca59e13d26b8de51, 0x5d63ae72ef82dc3b, 0xc8d694b1b6e8c295, 0xcd6124b8b42518cd,
    0xbe31d295fe8476ad, 0xd21e3856cf8537db, 0x5b2de143de8312b9, 0xa73cd4fbf84dbe57,
    0x27f5ac89dcb23a91, 0xf9a3e2c82ef3c6a1, 0xb2a61ce46b32d1c5, 0x6f792db581f96eab,
    0x1243cad9ecb271a9, 0x789e4b16512fea73, 0x9256f1e4c6be7451, 0x83724a5f17d8342f,
    0x35784aeb9d72c6e5, 0x25ed674b3de2f547, 0x5b78a92ca4bc32d9, 0x4fb59d2ec41d627b,
    0x1e38bc9dc572af9d, 0x1b869fca7eb56c2d, 0x3e65acb824ca89f7, 0xdb9af3e5ba7648fd,
    0x75eafc2d49cf1587, 0xad5f3c8ef534eba1, 0xad41678f3418bfe9, 0x5fd83c74182976e5,
    0xa79f45e6b8fca2d1, 0xf9d253c62f9d78e3, 0x4de2a13cb6cde387, 0x8b5fe3d14b8a1fc9,
    0xa276c84b867bfc13, 0xb1def65416e9ab25, 0xeac285619c623a81, 0xa47589d2d52f93b1,
    0xdc43eafba461c253, 0x58d16c4398fe1267, 0xc5e4f7691e38db29, 0x92537be8c16a3fed,
    0xad7438b585ce24a9, 0xcb4def578a9bf6d1, 0xa39e7618f64b1d85, 0x12a37fd8e248c3b7,
    0x4271f38a8751decb, 0xc9d3b7e1f7b439c5, 0x1ac4fbe39d58ec17, 0xa84bf256dc2956f1,
    0xea84b2f6f6428cd7, 0x1d8f2ab7e46d3cbf, 0x75afdbe96be5c4a7, 0xfa6c45be73b8d295,
    0x52c39e412f5bdea9, 0xfc4e8572a78efd31, 0xa4d27bc3fdc3a915, 0x1b7afc26adeb683f,
    0x21e5bc842cae4637, 0x385f1c4d41b87fa9, 0x9da4cb35be6d21f5, 0x861c253e3bd946cf,
    0xad621985b51923ad, 0xd924c35713a259db, 0x6c28efd75e84d61b, 0xf8674ab2b7cea963,
    0xb92d6831fe638a71, 0xe357a64d652c3a49, 0x3758d9fbcf7854ad, 0x97524c3b149be2c7,
    0x6b5ec97ad4f1b9c3, 0xd6fa4571789fa465, 0xfcd7e1b6ab89547d, 0xaf3c5e7ba46bd139,
    0x2ed18467c6a7bf83, 0xfe6d47b2fe38b4c9, 0x2ace59b32fb638d7, 0xc982f73b69d2bcf7,
    0x75c4e96a29a546cd, 0x62397d14f3826c91, 0xa85367fc61cf7d8b, 0x1fa729cb3c89ad45,
    0xb8623e1abfde93a7, 0xa91b7e83497c3fed, 0x563b1a4df5d72e13, 0xfbd2c854324a6d91,
    0x5be6943fe1f592db, 0x67bde8f9be258ca1, 0x798213cb85e2967b, 0xade83216295c7a83,
    0x6741bfd9c6b74ed1, 0x537a1c4edc685f37, 0xa9f217db2ed5bcf7, 0x51ef782c4bd219cf,
    0x4856b1ceacdb267f, 0xcd16ab8fcf94a2e1, 0xf7124cd8a45dce81, 0xa7bdf35e15dcb437,
    0x4ef6bca38ea57f61, 0x46be837f5cb76fa9, 0xae524398fc2a8719, 0x3a64c78e7a4826b9,
    0xc6ead5bf8da54b19, 0xf832b71e2f97ab83, 0x5cbd1973ac97518b, 0x26d17b9e4d3b18e5,
    0xfa8125cbcb63928d, 0xa9d5fc82359b24c7, 0x2fd3584b3e61925d, 0x84f629a39826137b,
    0x798c4b3fbc52a7e9, 0xfa549763cd57f91b, 0x4e831a275e639d8f, 0xb76a9dc8df49ea17,
    0x13df2e6c1ce7d5b9, 0x172aeb483bd7c169, 0xc9e64b83ac6e35d7, 0xe92f718534f9ced5,
    0x352847bad5c341f9, 0xd9fe73482f851743, 0x517834d929f36abd, 0xb65af7198f25c963,
    0x9d2137ef6b4d58c9, 0xc897db21d584be31, 0x1f3c8a75b2af6943, 0xbd1ec9f5e39812a5,
    0x18954cbe61e9a23d, 0x635bc1d276142c3d, 0x365e87c2a24ebdf7, 0xed564f12f36a18c7,
    0xce64a39dba26743f, 0x7fe6c29b3de579f1, 0xcbd63e2a61baf973, 0xb32e51c8b3196d4f,
    0xacd3f972ebf85731, 0x79ec548d2eb8af61, 0x9d28e74b61c74fb5, 0xf536ed92324a69c1,
    0xd6871b926cef3a85, 0x9da38745f7628b13, 0xdbc238462d89acf7, 0x58ef1c494f7a1e5d,
    0x53febd97d7b462e9, 0xa3e671c245db3821, 0xb41a2c8d95dab1f3, 0x251c8ef68ec736db,
    0xf4935a28dc9a7e5f, 0x3962bfe49ca8efd5, 0x37918ecd2e814cf3, 0xa5cdb37f769c2843,
    0xfd28b5ca65bc1d3f, 0x7cd1e24b87352c19, 0x5ae64c3f168293d7, 0x61dfb2ce5ae87f2d,
    0x4cf5d961d4867f31, 0x3a57c142712d4af5, 0x3ab627e95de6834f, 0x5f69bc71d3e5b641,
    0x5fe21394e825b491, 0xc1a7b4f6219d47bf, 0xefb17952c68b7a13, 0x9a4bde57df4e5321,
    0x7d831a9ca24fd691, 0x59847e313cb1582f, 0xf2c78b4d6d3874c1, 0x3b14fac9ec1d456b,
    0x896c2fd182bdc471, 0x4af27eb9b7e61329, 0x61db84cf2ea63cd5, 0xa18527bc8f54b1e3,
    0xfc71e94bc69e5817, 0x8f93abc5b5612489, 0xb7f6e91d7fdc135b, 0xce1924b68a69fb73,
    0x51349bac198f26bd, 0x1ed6298f71eb6825, 0x1fc853de534ed1c7, 0x785f3b6d2bc4836f,
    0xb9723d8c6eb17325, 0x19a5b84fe4f21c89, 0x674e3fc13e8f29c5, 0xed859cba53468ae1,
    0x1c9aed8637cef429, 0xab481dc573f95821, 0xbc1de286f9c5817d, 0xfc13b2848d2bcae5,
    0x6d1784fe6e75d381, 0xa2f7b4e18e76c349, 0x34ed7986be91c3f5, 0x1724e5f9a9e1f745,
    0x253ca1b7e25cab3d, 0xd7b4acf3fae35961, 0xd7a386fce17cad59, 0xf2e497bd1bf45e87,
    0xb753d98fb1a248d5, 0x8d3e2194fb984a21, 0x41c759d86529ef7d, 0x2a61dc53acd9fe67,
    0x7ca51bf85b7df691, 0x2b9d375a49ac3e5d, 0x7feb1528b48a7e25, 0x342be1cd8671934f,
    0xa9236b5cd8162b9f, 0x3412589d49dea5f1, 0xb7e8196537fb4e81, 0x8347edca71a836cd,
    0xbe735d4832c9854f, 0x9bf25cd7f3ca8675, 0x2e6b9743a9d8bce5, 0xf3b4c2a8c2f6875d,
    0x1f746b358152b7af, 0x719468b38a7354f1, 0x6dc324b8147ca9ed, 0xafc53719512ae38f,
    0x8537de6b6438c5f1, 0xcb6a9f2ea4326e57, 0x3954d1cbf46ba237, 0xa6f19d7b35ed14cf,
    0x94f568c3c45f7aed, 0xdb92a6f5852b9f31, 0x1f5c9327b61fd937, 0x5cb6a4f7576139cf,
    0xb13a847ea85d2bcf, 0x951fb3ce57836ad1, 0x53ac4b2e742e8591, 0x9e8dc7b152361af9,
    0x9cde8af3fe9a5dc1, 0xd736e284c698f2b1, 0x4cdab6181e9837d5, 0x76c4fae3ba83d4f9,
    0x1ebd8c243fc1745d, 0x512cd984d314e2c7, 0xa674db9e4e375f2b, 0x94a2e367bafd16e9,
    0xf9d5bc82ce9bf3d5, 0x6fd74cb96714eac5, 0x3eba6df8e548a67f, 0x31974a82f6e27db3,
    0xd26c94e596bf7321, 0x98bcad7f14ab85d3, 0xdb5e163f152dcfeb, 0x23f71684d498b125,
    0x1b52ed473abd9651, 0x4abe39d8a46d827f, 0x2918ca7f5a1982cb, 0xfe29a8c43aed4827,
    0xea1436dc645918fd, 0xd918f53a9c514f3d, 0xcb78e2da8ef1937b, 0x4da5e39214cade8f,
    0x7632a41d2e5971bf, 0x8742bf9c368ae257, 0x8c7b1e39a34e2c95, 0x8eaf1c734e5d23c9,
    0xfec741621796ca45, 0xf2b4c3ad2f1a9d37, 0x49231dec49a6f857, 0x983f6b4e96fec857,
    0xd83e91f4d9c568a7, 0xf3ac9d8159487eb1, 0xea35f68bfa1d74e9, 0xe12b348d76eadbf1,
    0x7c9186dbef938c7b, 0x9fe5a18786479c5d, 0x58ed3cf648931ce7, 0x1d374b256c379e25,
    0xbfca17e41e95c347, 0xeb169cf86ae4fd89, 0x16a92be7bd9c2e4f, 0xcae578dfc79a235b,
    0x278db65fa67123f5, 0x2543dc17fca825d9, 0xe17f8d6afdc241e7, 0x547a283edcf4a569,
    0x5ab1846e54f9b167, 0xe86d57c2c49d27fb, 0xa481957ed8645acf, 0x3768cad162af7835,
    0xa928471cb12ea489, 0x9adfe5c23eb42a61, 0x73c8e1b92be87195, 0xf783ce24b51a7e83,
    0xde7215f48b1e52cd, 0x89fc47ded2c3a8b5, 0xf8671a525fab16e9, 0x897eb53614675cb9,
    0x1c4b5392ae45f179, 0xfe751cab62d7e95b, 0x6d7f24919f463587, 0x5fc18a79e3486c2d,
    0xebfc28d629715d3b, 0xc8b6971f41c6ab23, 0xdbc298a6d4cbe389, 0x734ead2f185c26d7,
    0xe28fa4395c23e6fd, 0xb498df21cdf86e17, 0xa4182d3cdfb8ae61, 0x3ab8dc45f187eb39,
    0x65198f3eb5276edf, 0x3b76e1fd8da4f65b, 0xf2b8ca4121f58b6d, 0x7168425caf9428c7,
    0x6853a4ebe21f5693, 0x67a834b59f84523b, 0x41d6b38a62c13fb7, 0x83594ea21ed64caf,
    0x5eacd1724fe215d9, 0x4dba9f37ca5d2681, 0x1c8b3d579e548271, 0x59a3248dcae81693,
    0x49e57b8df47861d5, 0x1fd74326c3f8ab1d, 0xa2be741f2a1dcf75, 0xbe1d4c59c934bfd7,
    0xe9c7518a4b26c3e5, 0x9d4b6c1e2651b94f, 0xc6ba214e6bc51d8f, 0x7bde4516cab48927,
    0x1f736d4b84e59ab1, 0x63bfed4a9f1e3d85, 0x6d1c24e71a62c875, 0x1edf756c49a3e8cb,
    0xa972416d5a43d67f, 0xb146fd976e42fc1b, 0xd5a8b461c3f8965b, 0x2df8519ed92a47f5,
    0x5ac8d4bfd824feb5, 0xeba83fdcbd4c983f, 0xf7c35419875c963f, 0xc8ba4f959e1bdc57,
    0xe5237fda14792edb, 0xd4876eb9b18639cd, 0xe1b63da243cae18f, 0xd9f15bc4a841ecf5,
    0x3c79a8fe314b7d89, 0xb2a873d64186cd27, 0xbac289e7c8be7149, 0xf874dbcec89e245b,
    0x867c3dfbdfba7815, 0xd2e78564cb38f9e1, 0x294b735f87c4b31f, 0xaf25637825e34d19,
    0xd2cba491bfa7e439, 0xc82794f57ec31a9d, 0x2489af6cb7e6253f, 0xbf327ad583ae2f5b,
    0x293b156df253b9c7, 0xf68539ba29a7d853, 0x6acd9e738f3716a9, 0x4f81b375ad2bce3f,
    0xa8d4b25956ebac29, 0xafcd1895967cabdf, 0x32c5b7d9bc31e75f, 0x53f49a28b2743c1f,
    0xec3b49f1bd94382f, 0x5fa82cd39ec624b7, 0x8791efdca68532fb, 0xc63fae1b29485edf,
    0x28fae34576398fbd, 0x6d93a1e459ceb81f, 0x1259f4eb7dc631f9, 0x9f83e5769bc38567,
    0xa61c2b34e7a3951d, 0x3ab1d96751479ebd, 0x196d4b8a2d34b951, 0x954631c72fc95ba3,
    0xa1b8cde5b62f85ed, 0xb489532735f86217, 0x64f9d57a682cf3b7, 0x9ba56f72e627fc85,
    0xad351f4284c73f9d, 0x92d3c64152d46973, 0x4f3c27e5639854bf, 0xa4bef583d43c82a5,
    0x96c8ea4fc8b154f9, 0xc417a895294f83db, 0xf5726c9e692a14fd, 0x92e76da5e83164cb,
    0x9f64acbe1d82ae59, 0x7ce8d49f62534ae1, 0x9b4857a23c97fe8b, 0x319e7dcb726418d3,
    0xc526db17c3ea7941, 0xed9ca173b3fe2615, 0x923d6bf5f695b843, 0x69e3a1fd72495d6b,
    0x9e8d16c2b7c21a93, 0x5d63781ca79fdbc1, 0x215f86c31a5867c3, 0x947f5e28f4ce683d,
    0x9d57b82ca4685731, 0xd69574132795164f, 0xb8d72569e21b8d57, 0xe1c5a94b48bed7af,
    0x1d9a42cb79a6f1d5, 0x2e536dfa2a4d1c53, 0xe5d39f28195a746d, 0xf865713e291f34e5,
    0xdb65ce4839ce7a6f, 0x145f8acd1eda574b, 0xf17ebd32f48ebc27, 0xd56137fe572b46f9,
    0xcf276e849a21c86d, 0xb28aed3c598f4ce3, 0x24a5fe63e6c98ad7, 0xe8a72dfb6b51283d,
    0xd1796f5ae2a4f97d, 0xc6db187484dce325, 0x5c6f1284e65ba2cd, 0x4859dac6235fe16d,
    0xf7a4196bc6a74951, 0x8d4c51eb48d6a325, 0x259dfb734136bec7, 0xbea8d695ed832a17,
    0xc2f78da5f891d723, 0xa41ed357c7e8a563, 0x3f472916ba17dc5f, 0x5d8f2a76486db157,
    0x37f8eda423e1ad47, 0x97cf5a4bf9a2e86b, 0x43781b5ac638eba1, 0x619c78fb42716edb,
    0xe9b4652d4d9f36e1, 0x836fe5b4f8bd1625, 0xdf3695ae1bcea963, 0xd1a3fb87572eba81,
    0xd5c97ba81acf4789, 0x879a1c52a5e92137, 0xa329b674bc546def, 0xec8bd9f213cd9b2f,
    0x9e72fb3d2c9d4b53, 0xbce71f8a59cdaf37, 0xe637589f4538cedf, 0xc4695e734956e7f3,
    0x53fb6819ef861347, 0xcf9ab27586a59fc7, 0x63da5e9b9a2764ef, 0xe94c2fa5b6281e93,
    0x2a6d7f35ac6231d7, 0xb63caf2d1ce9f7ab, 0x7fb54e162a8d5ecb, 0xcd981a5fb1379fa5,
    0x1a3b4f5d8c6517bd, 0x62a1d5b9418fab25, 0xcd38f6a1e385147b, 0x149cb82ea6d8e271,
    0xbf1596ed173de8cb, 0xa1375bd49e162845, 0xe6251c48c24eab13, 0x61c34b2a8143edbf,
    0xe79134bf9521aec3, 0x5cf124db892c16df, 0xfb3ae169e42f1ad3, 0x82a7196ce3c4f56b,
    0x13f927cec8f4251b, 0xb5a6e1891fa6eb35, 0xd24fe1a528543ed9, 0x2cef76d8b95a874d,
    0x1aedf9b67f5c23ab, 0x5fad7e9be197a36d, 0xd7265b31d5e7c4a1, 0xadf9ce51d894367b,
    0xc2eb1a95689fbae3, 0x1a95d836bc81d349, 0x2b845317d97b215f, 0x28b673fe48257dbf,
    0x8259743c762c48d9, 0x7ed48136bfe74a1d, 0xc3f95de7ca819523, 0xb7219f8dfc2dbae5,
    0xf2146a3c15eab4cf, 0x57e9dafc34e1a67d, 0x9afe378d753bc641, 0xe279c64d4e5f7a2b,
    0x29ace3d172bc9143, 0x3ea4b19fb21d4f65, 0x528d679bf39468eb, 0x4281eb6f41cfa69d,
    0xd921e8ac78d21cb3, 0xa568324c1ecdf423, 0x619d7e34bf278c5d, 0xc7ea819f63ca287f,
    0xc3a6e5294269da8b, 0xfb624e7896aec1df, 0xa87fc946178d23a9, 0x7861ed5c8ebdc2f9,
    0xe83a9fdcda65183f, 0x864c5fa9daf817b9, 0xb4957dcf83d4956b, 0x4a9ed6281cae83df,
    0x68b3257df42e9b85, 0xdca316eb528f1cb7, 0x4df853eb1a2f5be3, 0x746d8a9368527d91,
    0x29714bda8a6c2375, 0xcba1fd92ce9481b3, 0xfed194627584cdf3, 0x8159be6c861f4c9d,
    0x52c6d183f897e65d, 0x914fa3d6c9f1582b, 0x65b183acf9543827, 0xf1b283497cef19db,
    0x53f41d876f7a2b83, 0x7985e12361497ad3, 0xc3b985ea9c8b7a6d, 0xc6e812f5cae5d623,
    0x935d6efc2bcfe149, 0x793ef6b5c1ea5df9, 0x7568b1d26d239bef, 0x6f45abd748e75a6f,
    0x3e4896a243fea5db, 0xfd18c3b581a295d7, 0x357281d414cd695f, 0x4815fa2c16c72a93,
    0x186cdfebd183c4ab, 0x2d1c3e942786c1d5, 0xa83fc96eb75cdaf3, 0x462a9db751be8629,
    0x5163a9d79817d4fb, 0xe4d3b6a7a685c9d1, 0x32c91bedba6e371d, 0x6a51cb946db8c317,
    0x4971fdc6c25e48df, 0x9ac14d52639c7b2d, 0xd2e859ac5971eadb, 0x3796e5b1abde816f,
    0x12a3de845b26a3df, 0xd1ab239e35fba291, 0xd93ca74fa5d81b49, 0xedab7149164b23ef,
    0x698b1afe69dcb4f3, 0xbd94e2fa1d27e43b, 0x891d236462cad137, 0x6c3fba5285e3a61d,
    0x6c312af82bd47f91, 0xbecd217575ed96ab, 0x1cd862e4ce7bdaf1, 0x2c9f73d85dfb1ca7,
    0x45e9af124738f5db, 0xd4cf251b439edf2b, 0xb948a3f7429f6be3, 0xd3b6fce293fac681,
    0x1a57d2f3249a36e1, 0xc265b9ea2c68fd51, 0x1376ad5289f762bd, 0xbfc4967e5ecdb237,
    0x5b8c1a37fbd4e7c5, 0x71b3d9af452bfe8d, 0xf67e315c2fed31cb, 0xafc64297cd2386b5,
    0x825dcb6727b9a531, 0x8137cd9e169a34db, 0xf9ed6413b39fc2e1, 0xaf56e7323b5da19f,
    0x78f649d39f78cd65, 0xaef693bda56cd9bf, 0xbc589fe38c5ab9f7, 0x26cfa93759cb4681,
    0x4df26cae8dac592b, 0x564bad21ec96a17b, 0x59ef76835637cb9f, 0x186fe5a3ced5128b,
    0xcbdf17934e82dc73, 0x4b56d2ef827dbce9, 0xbce714292e41963f, 0x27a86f31cea15487,
    0x9c4f527d462d597b, 0xd43ac8e5e23874b9, 0x852ba19c8bafe6d5, 0x6c89ae41b8af4627,
    0xc85fd74934fc258b, 0x2b9f76c4a9cd386b, 0x8b31e974e36894c7, 0x567fa821efd43ab7,
    0xa167d98583ef41d7, 0xe1b93568214c68ad, 0x6f9db48c5a1be927, 0x5cd94e12a438f795,
    0x6ace514b4be98d27, 0xe436d9579da64c87, 0x91c8467eb285ad63, 0xac4b1f5293dc6e8f,
    0x9e7b458a5f9ad721, 0x5e496c7f876fc4ab, 0xa5e462719475db23, 0xe7289abfcbf32ed9,
    0xfe9654d18ed3bc6f, 0x8d16c2e56ab7dc51, 0x748edba61ecb9d73, 0x4d715f82abed3f59,
    0xd85ab27e35d6af7b, 0x4bad1376ef8241cd, 0x7e8d41a2d8372e91, 0xae93b162f31e2d69,
    0x41d93cfb83a6d421, 0x4b9d263cb7e4c983, 0x8ca6974e6b4a175f, 0xef8a2db9f7ecb51d,
    0x974f2cba8325bf71, 0x213ca87e974eb325, 0x69ace5187246a913, 0xfac258e6e2318c4f,
    0x73a5d12e2819c7b5, 0xc985e4b7269aebcf, 0xa4bd51c3418b6957, 0x71f9ea56d13c4a79,
    0xefd7156963ed9481, 0xd678c3b49fb154cd, 0xce4297f8d7fc4651, 0x73f9cb6193417bef,
    0x71cd9f86c93f7a85, 0x82ac6dbfe7c6a39b, 0x3c9d6bae694873f1, 0x5927afe6589adc21,
    0xeb8cfd5794528f71, 0xad1792f84a5f2617, 0x6517ad8f916bc4e3, 0xbce5fa37a82657db,
    0xf43b6daebd45618f, 0x69fd3c4eb1dfec59, 0xd6ce345a64b92df7, 0x58f762eab4a3d1f7,
    0x85ec2a41bdf359c1, 0x379bc8ed482dac67, 0xdfe6392a295aef1d, 0x5efc47837b1f849d,
    0xa7d2b9fced6f8ab3, 0x86f29b373fc76b21, 0x621df9431f6abec3, 0x81b4e9251f73ae5d,
    0x9a2518bec49ae62f, 0x3c6ea89d7be92c81, 0x52fb378cfc48e697, 0xb8afdc4e1728c6d9,
    0x356b714ab85a32c1, 0x137f46b93125ad4b, 0x9a15e7f42d496eab, 0x514ebd9f34a6c2df,
    0x7d3ecaf515862e97, 0x8536c2bdb15d2ce9, 0x526ca9b3cda4153b, 0x9caf8d7b7f649cb1,
    0x4f7ea25be7a389d1, 0x3fea24dcf79a3185, 0x4a7e91fc84fcb259, 0x329b8fe1a7b8631f,
    0xfb5c3d21382176cf, 0x96da3b857c8efb49, 0xf158c3dbc29f4d83, 0xa3146be54dba35e7,
    0x3b7f951d2e63cbf9, 0x19f463583a4e285b, 0xf923d65ed78f5a21, 0x4ba6ec92a826e941,
    0xae3d581f265ed93f, 0xe2b18cfac391628b, 0x16342f9e8ab47f13, 0x86d4973b29ed81bf,
    0xd8ca1e34f6aed579, 0xa3c2fd49a4f796cd, 0xd6e21a85c51f82a9, 0xf4e5932cb2d3e941,
    0x2fb1936c2c8d546b, 0xde8f1649f8bc25ed, 0x781e32f9c6b92845, 0x4f75a19e162bfa49,
    0xc48da9efba7f19c3, 0xab82f19d6f9ce543, 0xe73542cda146c875, 0x7cfad98241ad698f,
    0x5baf3c247645fcbd, 0x15deb824fce26531, 0x5ea192847f4eb913, 0xc68d9a3561dcab29,
    0x2e631dc8ad9172b3, 0xdef46527d8b6e427, 0x928e3d167f6a5829, 0x87eacf3b38f69c7b,
    0xfde41372a2d4e1b3, 0xc85b4a2323b54cf7, 0xa537f2b1312dacb9, 0xc8461a53cb8fd315,
    0x6d73591ab6f29a57, 0x679cf41d394d581f, 0x8d15972c57c4362d, 0x6d1eb7f2fcd73a9b,
    0x8ca5e71deb9d6587, 0x8b7631fc15ca72db, 0x4e758cf6829ed4cf, 0x821cd7e4d56f2819,
    0x58a921fc5bda9427, 0xabf3e194253af8e1, 0xa8cd5419b125d68f, 0xab6e392d6b3d45ef,
    0xe65a8b7f8e6c2159, 0x576a43bc3fb5ae67, 0x9c6daf21a78e23fd, 0x26df4a9e8a791d6b,
    0x3e418f2cf372619d, 0xabc8e24d7b2da853, 0xc613e9d4ba84efd3, 0xe7938dc5f914b26d,
    0xbd752f1978f15239, 0xd64e3b8f47db1825, 0x2df1954c2b6f7835, 0x95e7fd825cb86397,
    0x23c6e5abde625139, 0x31dc7a641a6edcb7, 0x9f6a5dc151d97a63, 0xc35d68f23867ce95,
    0xb283d615983ba6f5, 0xd9b15c42c7a25dbf, 0x5eb9f7c32b4ecd51, 0xb6e5382d724cfe6d,
    0x93245af898b73c5f, 0x8639f51e8634c7d9, 0x73bcdae14a75b831, 0xa91725f85839fb17,
    0x9fa1d7c8b35ca429, 0xf623b19d84cd1e6f, 0xfbec41d8eb6cf283, 0xd26573913279a64f,
    0x7af41de926975ba1, 0x7ae851f634e5a2d1, 0x7b3f69c168fbc749, 0x85914ecfb987e5f3,
    0x946f5c27a2be871f, 0xc7fadb93ba5364d1, 0x4751fceae374ad25, 0x173e92dce9b5362f,
    0xf462ced3af7654e1, 0xc5176f2e3e841d69, 0xc94dba31cbd385ef, 0x291e4d5815e3a2c9,
    0xc9f45ed29f215cb3, 0x97ec36fdb92e54f3, 0x296453f74bf19e23, 0x6c1bd942d5f279eb,
    0x4b16298a68217ea9, 0x9d86c5a49d36bef5, 0x2cd693e4c85bf9d3, 0x5a2d419fe958276f,
    0xe6f2a871c7b15da3, 0x8b9dc41a714facb3, 0xbe34d87f8f67a325, 0x84d15b39ca6fe3db,
    0x4de189576be8c2a3, 0x3d7f4189b1683c4f, 0xdaef386bcf2e745d, 0x2b85e3717a62c4f5,
    0xa372d8bc61cae54b, 0xa7c612b8634c589b, 0x3fe7a9d13be46c1d, 0x7db56f982679f4c5,
    0xca1f56e3497ea631, 0x5648e92f1ac94e6d, 0x5c98e43a2da1e4f9, 0xc275da4b534f87d1,
    0xf9b587ced2a1b985, 0xeb72fa648b627ac5, 0x4a62f93735d2a49b, 0x5ed9a7c2fcd26189,
    0xed1c587ba84cb35f, 0x97d2c3b45f3914b7, 0xc2fe417d8b6f739d, 0x1934d78ab2cf6435,
    0xcef53294a5ec184f, 0x4a73de6b85ae2fb3, 0x17ed865b94f8213d, 0x71e382dbe726f89b,
    0xbdae2315fc5da68b, 0x378b4de156b9e82d, 0xe15c4bdae7492af3, 0x21e38dc4d271a6e5,
    0x2bfe5946dac6b479, 0xe651abc71e82543d, 0xefd49678ef37c14d, 0x14b6a5e394387edb,
    0x1478fa93691eb37f, 0x72db48164ecda26b, 0xe7b6cda9fca17d23, 0x21a5c89edc574ae1,
    0x9da7f24372fad31b, 0xa67bc3526981ca73, 0xdfc38ab23ac69421, 0xa91fb653ad6e2195,
    0x4ac892d689e2b315, 0x29e1645792fae145, 0x14ea2bd7c2afeb85, 0x5a743ec9cf542a1d,
    0x62f8a73e7b8d23c1, 0x8d2ca15b67d29a15, 0x452368ed65279e83, 0xad68573c64d5b91f,
    0x5d31b74e9a7ce243, 0x529a4c81a74d1529, 0xbe9f34d2a731be5d, 0x5d6a8b3fc6294715,
    0x1f28c376a1b98d53, 0xb2c14d37efad94c3, 0x6c8f1e59ae25c179, 0x1fca5b79569b2e4f,
    0xbe6ad238296b1c8d, 0xe8649cb359436fab, 0x6b971c245edfc1ab, 0x3541f2db4d639e81,
    0xe1b5ac4d3e5912f7, 0xfb64dc52ecd14257, 0xf152b7e4f6891425, 0xb38a4ed18ac5d263,
    0x316b5fae85fad1b9, 0xf3e561945b2d96f1, 0x32afb8d9e138a9b5, 0x75e82cb1a95e1cf7,
    0x45fd267c5ecf9a8b, 0x213ac8dbefd41237, 0x3a52de1c948ed72b, 0x4e9b1fa8742d93cb,
    0x9af364256f274ac5, 0x16eb5f37c3ae9d81, 0x346b72f8bc729ea1, 0xcd4ea2f3581bae43,
    0x194238d7fe286dc5, 0xcb5fa926952ba6e7, 0x95cf264e91c638a5, 0xcf29354dc1d7f9ab,
    0x63c27b9ed62e17cf, 0x42bd183a2bce46a5, 0xb3ad59868d49ec2f, 0x5e6b14a28fae2137,
    0x63ea1d574cfd37a9, 0xfe391827f71ecd3b, 0xa9d8e2564967e83b, 0xba4c7fdec32e97f5,
    0xeb86af39fde78a49, 0x8bae61c2547ea6fb, 0x41d2aefc912e743f, 0xad7c14f8fadb4e25,
    0xefab5c64f7e5c43b, 0xea85c962ecf95267, 0x76829ca573895621, 0x685ac24f9caf45bd,
    0x3f69b54da4cf126b, 0x7c86521ef18b95a3, 0x16f5c9d36e4fa153, 0xf213465a3572df4b,
    0x2c5bde84b42637ed, 0x23cf6e4afde6c723, 0x7248ef9dba314d89, 0xb152c9ae923c41b7,
    0xa78c3b52e2d1c837, 0xf8c45b27693c87a1, 0x34c1be274d6c97e3, 0x5f9eca2be8695ac7,
    0x4da986c7d2a96bf3, 0x1879cd4a27eb83f9, 0x58e1462b9bfc5763, 0xd6b4e15342f36c8d,
    0x2f6cd5ab1f4c2ea9, 0x9756c18b28ebf947, 0x4d8ceaf73e9b4ad7, 0xfe46951dcef2976b,
    0x459712fe382f6cd7, 0x8d17a3c6d6831b5f, 0xa43bef87ad27685f, 0xec15f93a4c851b79,
    0x68de745a724d3ec5, 0xb78d3a9ec3e48697, 0x6a9d51f252d31fcb, 0x3916e8c4a9568147,
    0x7692da31eb32849d, 0xdc3ab716159483ad, 0x4e156a7be87d4ab5, 0x7d32b1545bde4781,
    0x45df3a984b1da965, 0xb9d1f3a2b2f7d895, 0x1dfab83598ca712d, 0x8d4e3f6b46b829fd,
    0x53b9862f379e2cf5, 0xdb2ac8ef67239d85, 0xe6fda8158da9325b, 0x6c93efb76f13cd45,
    0xf7d53c6451d98637, 0x4eba3d21a1678c4b, 0xb714296fb178e9c5, 0xe4219caf7d52f1b3,
    0x217394beadeb3f15, 0x9c61d2bf5e984f31, 0x28e56134b3c9e2f5, 0xba71d346782ab9ed,
    0x53c4db914eabc92d, 0xbdf26783e72a1b89, 0xfbd41c9ab4c12eaf, 0xdb192c7f4ce926a7,
    0x31df74e8edf624b3, 0x13efd7c897c8543d, 0xd82b96aca826ef97, 0x3a574fb8562a7fd1,
    0x9c6fa735354b186d, 0x72c3a4519b473def, 0x87e1ac3dc3e7984d, 0xce64513d4c3e781b,
    0x8de65a214a7e3cbd, 0xc8395bd167a5ecf1, 0xf234edb9c524d63b, 0x852731db24ec3a57,
    0xe637ab957498cb5d, 0x5d79164aec3674f9, 0xc7edf9a2a8519c4d, 0x26a7d54891b4a7e3,
    0x53f76421e358d79f, 0x5b421c3912a65e7d, 0xfdea7594c42e78d9, 0xce8b2a74c914dfa7,
    0xba5d972638aed1bf, 0x9125b6adf932ea4d, 0xb1439f7e58af2cd3, 0x1ba5cef2e947c32b,
    0xbf785e3dc8574be9, 0x9642c7dec27e1f3d, 0x37cfda45ea72dc3b, 0xe1c39ba7cd2845f9,
    0x764b3f8a74956ed3, 0x6d8f31526198ec7d, 0x6b1df352d178c563, 0xf18dc5bab623a985,
    0x2397f6e1efa27c85, 0x4ca931dec82f94bd, 0x76dbf31e68a2b7c1, 0x4257b318f2d6a981,
    0x7dfb5e93b7d5a8e1, 0x918d5647e726d3af, 0x5216ca84e94f357b, 0x1f8e97b549cb2583,
    0xf2b641dc1aef65db, 0x7965418b4728ad63, 0x923baf4efe4ab69d, 0x58ae43c7951c4f63,
    0xd867cfea47e8af65, 0x7ab813e4c5864dab, 0xce16fdb4a7982653, 0x4a6c982fa265984f,
    0x7613a95425c16983, 0x7b8f4d2316572d9f, 0x735eb28c278be9a3, 0x32be419fa8d42651,
    0x46aeb532cef256d1, 0x59b1a2e74fdea963, 0xb17f96ad92b8e753, 0xe76892a529647381,
    0xb819467e9c1f3467, 0xf716c93b571b6489, 0xdb54f739c4f637a5, 0x96de5a8769745d21,
    0xfe3921856b91ad83, 0xc2da986fb5c3612f, 0xef1a62c46e12739f, 0xc5368d727a362f81,
    0xe9c67a3b7e5f64c3, 0xd13b58f424aebc79, 0x5c13a24d546fae8d, 0xa56c812eb8f614c9,
    0x21a8cbe7495c178d, 0xd8f9c12ab5267ea1, 0x1a3e7dc6b94f3ac7, 0x419ebcfac8b7365f,
    0x6f8c43d5291a4b8d, 0xcdb62ef9ec5b9643, 0x7e468519a57c2ebd, 0x52c1edb4abd7923f,
    0x4586c71b1a46839d, 0x79c218b61d529f3b, 0xba67c4513b841f25, 0x6d35921e456b81df,
    0x741bfa5874fa26e3, 0x59ab867c4d75893f, 0xdbaf63e2859a6f73, 0x6b1354e9b91a7435,
    0x2d5b789a2e8c4f53, 0x1c745a3921c8dab7, 0x7a48625fa948c72b, 0xc14a2db34718be93,
    0x176af423afb572e9, 0xb94f3ae76c8b9d53, 0xaf2b9645a9bc456d, 0x786b52ce9f68cabd,
    0xe258d1635276e143, 0xcda756847b24ef5d, 0xdef18324715ce9df, 0xbce67f14fe72d8a3,
    0x42d168f97cde6f4b, 0x9ceb2fd757264cbf, 0xfc21da987aeb9213, 0x71283c5e65c24d89,
    0x324b5d8f2a14569b, 0xf9bac124efc9b6d5, 0x1d36f98baf6ed295, 0x452e78ba6f58c13b,
    0x51f67cadb17ac3fd, 0x58d912c7f182d965, 0x2fc9d436ec4a1b23, 0xb258de7c4dea23cf,
    0xe2753dbcbc639ea1, 0xc17d3b9a3892a1cf, 0xcbe1da762efba963, 0x76d52c9b8fd32415,
    0xd8b3c1e4e1f897d5, 0xe6c8badfda34e8c1, 0xad98b3f46fd324c1, 0x1f9e45c6ae951bfd,
    0x81ce5bf679a4386d, 0x4bc6de831ca6572b, 0x28953eb16e43af1d, 0x852463ae895bf4ed,
    0x83d75f6141f23cb5, 0x1bf827da16294375, 0xd61b9ace81bfec97, 0xad5b89c3d5e28ba1,
    0x6bef49d7c6578fdb, 0x54dca3e823ce8657, 0x7e182dbc89417bef, 0xb8e9ad3c54d12ce3,
    0x16bcf5e9c8e9d24b, 0x2ec8d7f35a1b2d93, 0xabe68c15ac164873, 0x5ec891b2a9e56b3f,
    0x96e32ad5e2ba5169, 0x4bf12c8dfd59278b, 0x87ac6394198d4675, 0x8df72961f67de81b,
    0x3d28e9a1a517cdef, 0x32476a9c42ef6bc9, 0x817d63bfd5241e8f, 0x158db9ec6f874bc1,
    0xb231c9a4cfadb739, 0x82c961ed712594bd, 0xb9c286ea92be78a1, 0xa1628dc4d53a68fb,
    0x9a748e36d286c491, 0xdfb95e3818d25a9f, 0xb26f5cad16a9f4d7, 0xcb81ef542ad1f95b,
    0xca64b8d5c1b24f67, 0x8dbf23acd45216a7, 0x4da5169e21b53647, 0x7d51b623c9ef1da5,
    0xf3ce657dcea6415d, 0xba1e6d89f8c32a1b, 0x87fb1e3d21b46c3d, 0xc45d2681ed613c9b,
    0xb16e42acd62b1379, 0x693afe2129c8a3e7, 0xedb46a258c1db493, 0xce478f52918c76f3,
    0x41a265892d4915f3, 0xbc8573f465a437bd, 0x2adc98535f2863b1, 0x9ca5381b1abe5843,
    0x9d7634f27e58fdb9, 0x93dab7c2ce6a4f51, 0xd3bcf876e8cb579d, 0xb163d25ac529bfd7,
    0xa568e127c6dfa289, 0xb3e7254f625da849, 0x1f327ca5f34c1a95, 0x1b36c29d8b25eda9,
    0x479fe62cd5817b39, 0xca867935bd537ea1, 0xb4c38df24568b3af, 0x3652a74ea71e2983,
    0xb59f2e4aec1596bd, 0x46a72f1b6c8e734b, 0xfb2dae616fb374d9, 0xe8a539bda198256d,
    0x2f8536ab9c31627d, 0x8a4ced2ba95d3fcb, 0x5a47ce62934cd6fb, 0x7d362fc89f51ac4d,
    0xba7124cdf548276b, 0x5ae3b7dc56e7a2b3, 0xf9b6842e12e3df49, 0x659ed783ad7b432f,
    0xefd748253b169aef, 0xfd2a1743543a6de9, 0x9142abfd97cefa3d, 0x7ba43f1931c687ef,
    0x4dac69e749fbac25, 0xc876fd5ab5c3918f, 0x1749af85cf9d752b, 0x4c7f8b2a768d1429,
    0xcd45982f5b8761a9, 0xd194ab727563fb2d, 0xe972f634b5f67ec1, 0x21c835d737c941e5,
    0xcb3a6d2165de24f7, 0x581f967ca754f681, 0x316ea985d82ecf59, 0xa825b3edafdb6c89,
    0x86a5f4c7a291ebc7, 0x52ab9d712ae95b43, 0x3c4875d9cf613457, 0x65fa7b815ae49623,
    0x397ef5b87eabc951, 0x4caf72139e52a683, 0x5f38c1764be6c359, 0x28a9fb161285af4b,
    0xf42bda68b247d3e1, 0x19dba36e9b8e42c1, 0x2ba469c1b95137ef, 0xca5db9246ae48521,
    0xf6e84ad3a4b8e76d, 0xe1463a584d65a2e9, 0xa7e1df9b9e2c7831, 0xa27ce95d47df6a91,
    0xc2f64831b671dc93, 0xacfb83457624afd3, 0xf61e98c54f8695eb, 0x135c7b4675bad819,
    0x8b5f624afa6e143d, 0x9e2fa385462bea1f, 0xf742eb35a2bc58f1, 0xf654d9aca2b415c3,
    0xd72afb519cdae265, 0x31a589b7feab1549, 0x61b7a28c351afbd9, 0x9bc28647a5348ebf,
    0x1c9d56ea2641f7d9, 0xf8376dec2c5a3f4d, 0x5f6179bc4e6cd78b, 0x21684afcead1c635,
    0x675ab4cd239bda15, 0xc56b8923ec32486b, 0x72d461381639a457, 0x9c8325a6db5c3e2f,
    0x13b6dce5a9ecf3b7, 0xf6e9ad8c17e985ad, 0xf983ecb6743b2ed5, 0xcb21638ec385b1d7,
    0x46a52bc8f2be9a65, 0x48af76bcb49cad13, 0xc47e82638cba4d61, 0x962b1845d7693a41,
    0xa3d67425a93f576d, 0xf5e12b89d98fa71b, 0x214eba5725bfd649, 0x568da2b72e354df7,
    0x7e51d962f85a63b7, 0xcf612ed5c589a27d, 0x2a679ecd1bf4e325, 0xc41658fa7b65c243,
    0x5f1c8e63864d2f3b, 0xe16fbd94d7f21a4b, 0x578bd64e2a7468b1, 0xa5df2198f9251bed,
    0x5d2e918b3cfa791d, 0x24dfb5ec9e8723d5, 0x4fb71e5d869db241, 0x129f4a7e46da9f7b,
    0xde4c593bce1a526b, 0xfe5738aba241b63d, 0xe65db8a95c3d298b, 0xf6851e42af29bd51,
    0xac36e5f46d8791ef, 0x6a7b24ce8b456fed, 0x287f53ca4fea2815, 0x785abedc6cb4139d,
    0xedaf4c1be9dac281, 0x7d124eb6bf572c13, 0x5c628f39f642bc83, 0xb9372a5f8f4126a3,
    0xc92eda782a346df9, 0x3ab67f1e41ade237, 0xb739d1ef537d2ac9, 0x36a8d45fd1f72483,
    0x2e84b16fc159ba7f, 0x394de71bf9d8ec27, 0x7b58d1cabcda831f, 0xb6e48d2fcab6148f,
    0xd6897a34761248e9, 0x9ecb6738a49cdf21, 0x16ed3acfa1d5e2c9, 0xcb72ea315c237de9,
    0x5cd1726837ec48d5, 0xcf516829ecdf3745, 0x7eb58c249bd56287, 0xadfe51374c1f5d9b,
    0xf549de12e2a59c7f, 0x9cb8f3453adb7541, 0x257c3bd1fa6ced95, 0xef86935d2c69ad43,
    0x8fcde975a624de3b, 0x9a6c3b81d7ae6b19, 0x2869d13cb4dc71f9, 0x53c692d8a2d5c4b3,
    0x4a1f5e76f2b9ac5d, 0x9253cfde38eb4c29, 0x5c6bd8fada1892ef, 0x8f9a32dc19a6bcfd,
    0x892fa56d3f8b65d1, 0xdc6f943a5f98a627, 0x92a35dfb3e6a4fb7, 0xc8b26f5d8a4516b7,
    0xabed9657e2a78b15, 0xa4369c5b67cef2b3, 0xc4e2697874fc29d1, 0xbdc5a6394a6189f7,
    0x2be341f54b68a1c7, 0x4259d37ed37c84f9, 0xc1895762ac94f56b, 0xc1e7629fca265193,
    0xd6841ea54562ead3, 0xfe3b2ca141a8ce75, 0x6342d75a7c689b5d, 0x41ade3829521e8b7,
    0xb7cadfe4594f6bc1, 0xd86cb174df2a4893, 0xa4285f73fecb3a47, 0x43b7fa9e241d98b3,
    0xbd4c1896fa724e19, 0x23986bde1c69f325, 0x69fc1dab2e6587c1, 0xd129c54fe92d684f,
    0x3964cda5edc47195, 0x258de9c36837cefd, 0xea725f16ef381bc5, 0x8fd9c71e546b1cef,
    0xc7d51a8e287ba64d, 0xe6852ca97a513fc9, 0x2a49fc56284af3e9, 0xf2dc9a18c12769b3,
    0x7681eca359a6c7fd, 0xabf5963d629a5841, 0x712f4ce3c3e91d4f, 0x4d651be9481e9bfd,
    0x4da7269b58d4e2b9, 0x7c4e5ba1715a4cdf, 0x3486cae181ebc23d, 0xda65e1c7b23e8697,
    0x398d75a2b7acd521, 0x53bf7682d698f3b7, 0xbc2e46819b61ace5, 0xe234c1b797823acf,
    0x6e53a9c8584cd169, 0x137ba4fc68ae7fd3, 0x2471adfebac37289, 0x529a46cf93ef6b5d,
    0xdf2c1375af74c385, 0xdaf7c6527a826e41, 0x3529caedc5fa136b, 0xc612a8d357683ca9,
    0x5d896b73cde4375f, 0x8a4195f6d458e927, 0xb3c697ad57fa1d2b, 0x2598c637874eba9d,
    0x398a41b714276953, 0xb5867dea68c42d9f, 0x47ed29a316ace735, 0xd689be21793bfe25,
    0xae86d13545ade673, 0x61adbf9c678249cf, 0xb693df24514fab37, 0xf92163ecae4f912b,
    0x5284edb1fc68723d, 0x6f891ec3e1bdf3a5, 0x3954cb2624bcd983, 0x78fc645d6a1d2e87,
    0x9e42831f4ad56b17, 0xf475c1adbad46327, 0xc17be6f43f678cb9, 0xf62a78198acb6f53,
    0xe54af67269e8c45f, 0xeadf2831e91b7af5, 0x36abf7c85a39bf61, 0x23bac8f46e4fb273,
    0x46dfc83a893ea125, 0xed57f2b1c5872da3, 0xad18e3c973862e5b, 0xdf9a1b787c2a83d5,
    0x7f6d4a5937a1b2fd, 0x3678125aedfac82b, 0x8d24c539e2b97f1d, 0x65fed8b9dc63947f,
    0x83be47c1794ec231, 0xa238b514d68ce2b5, 0xf519b2376b24ea85, 0xafb316d5b2ce59df,
    0x25b6c841b82f5791, 0x9ba5e62762c79e4b, 0xbd4f257e763dafb9, 0x9dcf78beade21579,
    0x5f3e68dc1a8529cf, 0x7259adcb13a6fe89, 0x6db3214ef529874d, 0xe874adb14afec65b,
    0x4d573c2f492a5c8f, 0x65e78a4318c9657f, 0x3c8b5f195cb42d93, 0xda5e71b3bdc983f1,
    0x4379da183dac8e57, 0x3d2ebc5742dfa38b, 0x3fcbe96a2fb64983, 0x78519e4bde5a9173,
    0xf2b5d8a1cb7354d1, 0x26a3179b82cd4697, 0x39fc5e1b475d1feb, 0xa9325681ebac264d,
    0x68c3ef4d649f8bc7, 0x718bca69d984f53b, 0xae4f365b9cf72ae1, 0x7862ebc98cf2ab4d,
    0x7b16acf481dca2fb, 0x34d2fe9c56b9fc21, 0xe18cb9a3c4e69a25, 0xa86d3cf5cb2e643d,
    0xeb1d84c9168b347f, 0x46b9258ec83724a5, 0x287931df6714fba3, 0x816c5f9a9c67543f,
    0x8ec5f1d49c28ba7f, 0x6a71c4531f2385b9, 0xfb69c51a517e346f, 0x2c845e9a42c93db7,
    0xe459b76c45c69a73, 0x759f1ca3cf1e6b89, 0x36ac85f1b4efc953, 0x4feb193c3bd6791f,
    0xde47f85c6ea4c37f, 0x7da93156c2af4d97, 0xdf1ce86b423e6817, 0x2b5e3a4fb6c4fde5,
    0x67ba13284d5cf127, 0xf9db13541ec2459d, 0x7392afc826ae4851, 0xacde8f1578a6241d,
    0x9f3b6c789cb763e5, 0xdf1be392df98eac1, 0x43a2be95a52ec4b1, 0x5ab46e93687c41ab,
    0xc34956f12f5d6719, 0x186bc73d9a1647df, 0x4bd6a8c2c1a2de63, 0x2c875d3464dc275f,
    0x8f91b5acbe245967, 0xf976341b6312849d, 0x2974f6ce32e96cd5, 0xc5f2d18b348d7cab,
    0xa421536c7bc932a1, 0x28617f9e867aec9f, 0xfe4a58b12ef76c3d, 0x2a3fbed1d48517b3,
    0xf56bc39d8f596ab1, 0x95dec37abca8df97, 0x798bf1c3a5e6bd81, 0xb18394a5251b863f,
    0x6531c4ab16d5c98b, 0x9325abcdea347869, 0x5da2439e3f6b7ad5, 0xcb487926e5496723,
    0x415978323d261fc9, 0x4e698d5f573b6e41, 0xb46ef59192e1bf53, 0x82fdec3ac983fd57,
    0x72dbf9538eca61b5, 0xfab4c129bdc4e197, 0x697dcba173da62c9, 0x1c43972fc57b13af,
    0x4a7d2589ab897c23, 0x1a9327ef241dc689, 0x1ea4952395b4c1a3, 0x1fac5e26d893c547,
    0xe8172f594d5e8bf3, 0x51b962eca241763f, 0xd2c74af1e9bd6721, 0xf7c2adb84187b6a3,
    0xaf5394276894eba5, 0xf4ca153891eda74b, 0x826efa51a691d45f, 0x8f63759253ab12fd,
    0xc946e3a8ace6384f, 0x42918cd65891a2fb, 0x3e6ac2916d53cf89, 0x2d315c8a9d1f6e27,
    0x16e3fc2a2b836d15, 0x3472ebdcae498213, 0x17bac63fb2e3f479, 0x1da87b542cb4f53d,
    0x51d97ca3d5b7a9e3, 0x6a35bf9eae16395d, 0x9afbcd46eb4a1c83, 0x8cbf7d92fbae6879,
    0xc8537db1b3c864e9, 0x19a2bfc43d492ea5, 0xd93216cfd386a4f9, 0x57f42edab7ae9f5d,
    0x7a3cf59671b84e95, 0xeb21374c4937f16d, 0x8fed9a67c7b13e29, 0x93f4b8c5eb583cf9,
    0x8542319a27413b65, 0xc1a28e46e38c2a1b, 0x73b9cf62e2a5b4cd, 0x2aebf918d5aef8b7,
    0x8e32a97f1b324acd, 0x13faeb2deb986cd7, 0x764e1f9af426ce59, 0xb24f956d358671b9,
    0x8a75ce4d29548c3d, 0xe2b39dcf3f47a9cd, 0xfa36d5eca7bf4825, 0xc9f1aed8cd25e7b3,
    0x93ab7c8fe1c5ba37, 0x783254cdfc91758b, 0xc8df7e9b75641cdb, 0x973c4a58c5e6dab1,
    0x59ea6c7386c9fd73, 0x8eb1c4656c3dea29, 0x2fc4a938691ce74d, 0x2d9e5c3a52ced837,
    0xe15d2a3b15b2c97d, 0x25f4de1a76c29385, 0x94b6d5f1f6d72ac1, 0xa74836c58f439125,
    0xa83697b5d6435ceb, 0xe5278d34b9d5f831, 0x7854da96bfa749c3, 0x9e1f4ab7f961d325,
    0x82dfe413e61abf27, 0x35f47e9d3dae2659, 0x783c9d24e59c168b, 0x86d7b394d537e491,
    0xae2f1dcb4d8b12e7, 0xb789a3165c31a29b, 0x814257ca678cfad3, 0xf89da65c846e9fa3,
    0x168c7e492b6ec4d1, 0x7ab53f8cbd26ca95, 0xf153c7ab2841e6c7, 0x213968ace1f5ab69,
    0xd26f4817d348c51b, 0x2785c431e3647cdf, 0xac63b87eac9fd547, 0xb6a289dcacd73265,
    0xafb4562136abd897, 0x1c74a59654a9d17f, 0x5f62784ac79ef325, 0x2fa9c64ba4ef5b8d,
    0x583fcd42d283e17b, 0xe82194bf174cd3b5, 0xbc45d9ef43cd5e17, 0x175b4ce23a26985d,
    0x518f49b24a9e3b6d, 0x6bc4a9835e3bd841, 0x5eb913ca42d731b5, 0xb5d91c83f468c375,
    0x6fa97d5ba73d69cf, 0xa2e4c96fb45ace7f, 0xe48732b5a17e9fcb, 0xa4bf5d121acf265d,
    0x3df64ac72ce7185f, 0xf5237acd1e862793, 0x19d76a5c3b9cdea7, 0x83fec74d46edca89,
    0xd1a3926e8bc91f25, 0x536afb81f2b8e9d1, 0x5a6248cfcde26431, 0xc932eb7afa2d7659,
    0xbf736e18c47351af, 0x6791c25da3c4258b, 0xa674f9e1927e6bd1, 0x1b64e3afd5ae84c3,
    0x86f23d9e9d826fe1, 0x821375bcbcd6e45f, 0x7c8e9a1d8c174e6d, 0x68dceb93e37a89cd,
    0x837e124ce138df45, 0xcd3e89f1eacfb345, 0x2bea59f636f2ac81, 0xa7e1352fab6ef573,
    0x43761b52cd8a4e23, 0xb16c7ea2e284d6a1, 0xa7de2b91e639fbd5, 0x8f956c313e68fd97,
    0x2a78d6141837f64b, 0x1493fe7cec3d68b9, 0x4325d8bf76c519fb, 0x6d238ebc3c9ef7b5,
    0x6e8ac5b96582d1b9, 0x739af8e4bed6c28f, 0x756c8fbd8259ce17, 0x8a2419bda3c786db,
    0x14bfeca97bc3f2e9, 0xb5d12f98f2cdeb35, 0x2e4c1769b5198de3, 0x812ba54c56c7eb91,
    0x9b5163825b1c8439, 0xc893fe52167ed483, 0x568e39acd73c6b89, 0x75683b1f47682e31,
    0x5ba68d3e61d45ceb, 0x7b5461fda641289d, 0xe23fa769b6d42ca7, 0xca92f8db87f1be49,
    0x952648df3ca6d7b1, 0xc491b82dcfa538b7, 0xadc75834b78c6521, 0x97cd82e5e427f9bd,
    0x14a8f75e4ea37c2f, 0xb5c4afe37e416b35, 0xbe58a1f29fbec521, 0x56eb82f91e29abd7,
    0x6f942e1826c38b59, 0x8b5a74f32dbcf673, 0x8a14c97f1a8296b3, 0xe56798fb4eca31d5,
    0x4c6e35f71fea72cd, 0xbd8c1697da2543f1, 0x7c42fa9ef8569a37, 0x1f52ed64c2d7a365,
    0x46f7db93ea4c7f39, 0xac4768fe2bf7a86d, 0x31fba5c6c6da4139, 0x8d35619214ac732f,
    0x4f6c5b2865c32819, 0x6c9a37e2c41b93d7, 0x1e9f53843b17a8c9, 0x2e796183c61d2ab5,
    0x2b4c578faebc813f, 0xcd374189695cdfa7, 0x1abd26f927e34acb, 0x8d9a1c6bd13ce54f,
    0x36a52d7f2d16a4b3, 0xf2a6d37ea76291bd, 0x5af917326c853129, 0xd68e45ca396c1afd,
    0x475fbe3abe14c2f3, 0xc2b98d464c197d85, 0xc7d2f5e128c6fab1, 0xd39145cb684139af,
    0xf4ed1b36764e1983, 0x8bc35fd9263a7e1b, 0xc1afd8b2c26ed9f7, 0xfb3a5c6d5a16fb8d,
    0x61f9c7bab647f125, 0xde8cb753b198c7a5, 0xba89527c2c6a1539, 0x63ac8db98a92e6f3,
    0xc3821bd538f62cbd, 0xe89dca61ad7c32f1, 0x93f4c7a8638429a1, 0x14a85cf361ac2fe7,
    0xfead74c5ce9847a3, 0x81c39bd7a486dfb9, 0x7925ba46e8a395f1, 0xaf3c4e2d3a2e9715,
    0x5e8b6f93a8fce6b3, 0x6148bea561c8d243, 0x5d9c264a91cf284b, 0x4bc7f1a5cba9d127,
    0x6cbea78fd234c8e1, 0xb536924764faec7d, 0xab1f52c48215f6a9, 0x6ead5b89789dbec5,
    0x8571b6a3f1b86a3d, 0xa7df859c613c92bf, 0x51ca3f8dc674ab9d, 0x96cd38a58195e3d7,
    0xae1c693b6e9ac2b1, 0x71c592ed61d4e82f, 0x984c6af314ae2c79, 0x9317e5d242e86dfb,
    0x6be185cf1a68c4ed, 0x4ce3bfad1ce47695, 0x6e3da59bf9edb421, 0x6d9e548a286495f7,
    0xfdc4832bd18729e3, 0xd81a4b695782e3b9, 0x475c31f6752ec9bd, 0x69dcae28abefd475,
    0x7146da23b213cde9, 0xbdf13a8639ce8fb5, 0xd3ca587e326ca9db, 0x6f79528b8e14753b,
    0x3cda6925c154fb73, 0x1c98d52e8342cdfb, 0x6af91ed8f4512a73, 0xce948a761b5627e9,
    0xef478b9c4576d3e1, 0x96df74e35f27631b, 0x691ebfc5a8c1b2d3, 0xe5348c6b7c8361f5,
    0x523a48c7ec8da13f, 0x4eb8d97c9c3d5241, 0x5c81e42a37c296e5, 0xf1a2937b1258fa9b,
    0xf462813ba49f2e53, 0xd91ecb632bf87691, 0x531e2c9d2c8a359b, 0xd51b2ac3a2dfe653,
    0x5de4f3cb8623fd41, 0x368d92a42d4e8913, 0xa427c85d9f57ad6b, 0x95dfe6a1e74d361f,
    0xcfda6843fb8576d9, 0xa8c2fd146e284a9d, 0x9e6ad1cfbc2a8159, 0xf4a7e531a2feb639,
    0x375f682d4d1a9bf3, 0xb6c57ed2a6ef4257, 0xde21a7f8c384ad75, 0x9843e52625f3ca91,
    0x93b1d76c5f4c6387, 0x53eacf9865e4c79d, 0x73f96dbaf3d6a857, 0x4b17ca9efb6a27d1,
    0xe2a513461d28a645, 0x7dc4f2eb36928cf1, 0x9dab6134f38659cb, 0xbc1d2a6e3fa7e4b1,
    0x8fc7d52b2d168ba7, 0xa28fcb6d69b5e421, 0xbe5fa617fe68a7c9, 0x1d89a75f4b31cfad,
    0x75d462beb48d61c7, 0x973f8c4d84e516cd, 0x738e21cfea9f6385, 0x4ad75e36dfbc2a87,
    0x4afb139213896c25, 0x467ed2acfd2a47c5, 0xfd93864c6753acd9, 0xfbd84e1cafc62945,
    0x42da8ec62513de7b, 0x2be5968c1fb29d65, 0x87324bdc8f3cb94d, 0x9261e34ded53c21f,
    0xbc47983af46db931, 0xe82461fc3b5f127d, 0x9d1473a8e38c9745, 0x12f5b8ac2a4ef16d,
    0x9afd5287972bd58f, 0xc723af68eba51c69, 0x8e4bc63727419d5b, 0x61c5bd7a3a49ef2d,
    0x321da7fb4c8be375, 0xb158937a96db8ef7, 0x1f84365bd1a84357, 0xa89cbef64fa5b219,
    0xb564ed39c3b472ed, 0x3485a1be34e98d17, 0xb52c6e13c5389deb, 0x64fbe873b74ce9f3,
    0x5f18bae67c486315, 0xa2f9e7cbabe84691, 0x3bf867ed9b56dc23, 0xa2ced7494c2a517b,
    0x647591af3f16ca4d, 0xafdc4829c4ebaf7d, 0xfbca391e374128bd, 0x51a642874ec5b61f,
    0x3c75df6af9836eb7, 0xabe458329f41e6ab, 0xfd83e279c823af97, 0x82ad5fc9b853a261,
    0x5adf14bc61d948eb, 0x65efa1d3a6d59ec7, 0x257861a4713c9d5f, 0x569fc472bfea6253,
    0x68be942381edbc79, 0xc3ba9f526e812af3, 0xdf2713c6c51de76b, 0xe5841f6d2c687b49,
    0x96d7285e7351a69f, 0xa895e2362adb8547, 0x714bec6a2cfae135, 0xf6c2ed8ba638249d,
    0xa69fbd3213eb5f47, 0x852da34987cd692f, 0x496c3a18f937516d, 0x541fec8a74b59cf1,
    0xe6752cf92ec968f5, 0xe8c92163e8d5c7f3, 0x1deb43852e46b5fd, 0xdc87132ba1625789,
    0x732b9a1efe38cb29, 0xf476ed91baf824e9, 0xcab769f3c754ad91, 0x9368e54b746a2d15,
    0xb4217c6e8df12ca9, 0x8bea13fd2871e9ab, 0x986d2e7b4c61daf5, 0xa61e254b1324c895,
    0xac2e3b9f58746c39, 0x8b2c736e249cba3f, 0xa7ec36d97c1fe54b, 0x43d1eb7c845ce7f1,
    0xa2eb7dc31fce35b7, 0xa42d8ce974d6c1fb, 0x7c2f3be13968e4bd, 0xdf2e5169cfb2754d,
    0x1a98d63525ecb763, 0x8c1da26b548b26a1, 0xb85197f6539a8fd7, 0x32e48badb21d5e79,
    0xb1d85aec843b6ad9, 0x74b328154682cae5, 0xd7f92164b8f45167, 0x47f58d62431e657b,
    0xbe7c168546b582f9, 0x19fcd5a46dba39f7, 0xd8539ceb93f675ad, 0x3ea891dbadec8b3f,
    0x5dce26f3d2f51b89, 0x389c54619dc42e51, 0x1bf43872f1b34859, 0x62bdef513798c6bd,
    0x829c1edf69abc357, 0xb216378ef7ae5d1b, 0xf2143ec5921fbad3, 0x648eb2a38c95d17f,
    0xeb6189424762a9e5, 0xe32bd78c29e4b6a7, 0xb8e6a75fc28f3d65, 0xed4f1b5caf36e741,
    0xa7df3128fec873d1, 0x396e1bd574d15c29, 0xb784ae62fe38a29d, 0x9b54cd2fe79d8543,
    0x14fe5c37f732a48d, 0x5f61d974b6385a79, 0x6e85274b8546deaf, 0xe7cd165495ef423b,
    0x12fe95ba7a2d389b, 0xab8e372f63ca2e91, 0xe7c23fb641bd52a3, 0x41c7ba237d5e2ca9,
    0x1a34726e2fdacbe3, 0xe16df95c1b92ae5d, 0x12be9478918b657d, 0xa746e538fca79e1d,
    0x8dae5234643efb57, 0xd18be649c4796b8d, 0xe3a4182f63cb17ad, 0xd162b4af1b2e38f5,
    0xc1d59e87a2e7195f, 0xe8c9d2b51a56f983, 0x8e7cb62ac2f1a89d, 0x9134bc2536c5a8bf,
    0x27e1db45cf9beda3, 0x815ca46e927e138b, 0x78d2bc937816edbf, 0x7cfb2a69e541b27f,
    0x74f18da6f9584aeb, 0x74fde821f8e2ab61, 0x7c346ed9f6125b73, 0xdf69482c4a71cb69,
    0xe628da4f73a14cb5, 0xfa2d65b817ed2f8b, 0x1b379e6f37d8ef65, 0x9a86174e684fac93,
    0xfd69a832bde649cf, 0x6a9c438f59bca2ef, 0x8d49e6a1b2c1965f, 0xe6485c918fd25e7b,
    0x829543bd452c91bd, 0xea71324dafdc6249, 0x6c3b98fdc53bd249, 0x7a9e268d94b8e56f,
    0xfa5369c13f826ea7, 0x453ba67ec93f8215, 0xeb46958d37256c9b, 0x54278edc2e938fcb,
    0xca76851d8cf975b1, 0x1c45a9f63c1e2fd7, 0xed25c36f23f6b58d, 0x3b7fd82a9e652fc7,
    0xedbf294a173d6245, 0xd39872ef7d29e351, 0xef2a83b5dcb6a891, 0xef7d2395479d1cfb,
    0xda98357f549d6e1b, 0xdbc469526f871a53, 0xe37dbf42eb248751, 0x37fbca86a15de639,
    0x49f3ce27f1729ac5, 0x6d418937fcb62d71, 0xb4583672fb128ac7, 0x1bca7836ebc962a1,
    0xc9baf415986fce7b, 0x5a49dbf693e24bf5, 0x8e14cd3f18df97a3, 0x7b9e1c43cb78f3ad,
    0x351d824e1def63cb, 0xa6d45fbcbd12753f, 0x84b2f7ac1e8f734d, 0x748c9d2be27cf8a3,
    0xecda152b19ea36b7, 0x269b7183b1c684e9, 0xea57cd9fb4fe3ad7, 0xb85247ae5da1cf83,
    0x86bf3eac81caf74d, 0x2de579861c8a37db, 0x59e63a2bce6d4a7f, 0x175fced3715acf3d,
    0x6794dfea1f76deb3, 0x6873ceb9861cd42f, 0xa1d2347c29f38d7b, 0xb851de3c937c5e2b,
    0x5c7fae8292cb1def, 0x76afc3897214ceb3, 0x453cba97b7436c85, 0x4695fade87439fd5,
    0x723ec9db4e63f15b, 0xa4239cd182febc67, 0x5d6cf94acbe648df, 0xbc28a5f3ef19b265,
    0x61bc478dabd142e5, 0xd53f49a25ed864ab, 0x6bf758eaf319674d, 0x78e19cf6cd8f9e65,
    0x9df4e56a65372d4b, 0xa8497ec3b498e765, 0x72584ce96eb31849, 0x218acbd629781f35,
    0x5814e9f6d2b9f1c7, 0x8dfb2a64738c926f, 0x4abc6f73deac4189, 0x7b15c46d7a9b3245,
    0xf3678c296fa5b3e9, 0x5d3164274215e3df, 0xeb4cf853e6af5419, 0xca8952472a419bc7,
    0xac95bef1d369e5a7, 0xa4675f21ef6b48a7, 0xabf269475dc2b781, 0xd1958cf63478aedb,
    0xf7b39c4d28ae9bf3, 0x6d2aceb34f2ca751, 0xc138b9767e4361c9, 0xbac67e836217459b,
    0x45f912ab5e4cf68d, 0xef6837a53982ea61, 0x93fe7ac51f482b6d, 0xab9f4e71fe3948ad,
    0xdf29486a23981de7, 0xa4f6217bf823ae47, 0xd9bcef84e8a3cdb5, 0xba89e24c6bac3d5f,
    0x5bedfc9a59e421a7, 0x3b9e6185ed2f16c5, 0xa267c83d3b7e8d4f, 0x9fc7b5d1b1285de7,
    0x218e7abc5b6dfc41, 0x2ae364c926bce8af, 0xe4d3ac163947a25b, 0x28cf46e3cd8fa279,
    0x7a5b316e527bd831, 0x5f36c128e82fc37b, 0x27a5b1dc765d1849, 0xfb6c71e37e95346f,
    0xde17fac91b3825df, 0xd5183a7941e562ab, 0x65fce42d8b5174a3, 0x7da2cb3f81badc9f,
    0x4ba6d9c17e8bc5a1, 0xed36187a83c2ade9, 0x3d19b2efecf641d7, 0xd5c8ab6f514b7a93,
    0x8d53bc2fea928bd3, 0x8324a951a3be6985, 0xb31a248e5c3b7d69, 0x6758b31a6af3bd19,
    0xc42b9aefb7fe1469, 0xe974512b36c124b5, 0xac7958b3c6392da5, 0xf97b125ce897b643,
    0x367819b543c1f7ed, 0x915dca83594db867, 0xf789a3cd59c68fb1, 0xb5c2f9e474cb2e3d,
    0xb1de4a876deb8c43, 0x1752986c2b968ec3, 0x6efc8713ce2d6941, 0xb197345dbadc8e57,
    0x21d876bf4ef96537, 0x2f1a8375db47a521, 0xca72351b23e8d4fb, 0x7ec318d2ec79bf51,
    0xa52d7be9816ab4c5, 0x3b72dafc47b691a3, 0xc78d3629e263cd9b, 0x59deb268143e7825,
    0x7349be2173284ab5, 0x6d2958a475d6cb31, 0xdc81e56f16a9847b, 0x48db697564e73d81,
    0x1e78bacdac12d749, 0xcba6e791ed12597b, 0x1af278d57a9e512b, 0xc24ea1b626f38549,
    0xde6784c2ca914e3f, 0x59a8d1c2edc82673, 0x84b92a15c7a824b9, 0xb18cefa989ba357f,
    0xcf96eba85ad9b167, 0xf61c4e72bfd8ce51, 0xa9518263e3481cab, 0xc8f4d721c63e7f49,
    0x5e6cf8bda2ed5461, 0x9e41ac2fb86ac419, 0x157f4c9efd382c61, 0xd8472c6f892ae15f,
    0x2c7a839b6812c9ad, 0xdce16a895846bac3, 0xcdbf317874acef89, 0x48a7c2b1c17342db,
    0x8c5b639ab3c142ef, 0x96dcf7258dafb267, 0xc6d72f1472abce31, 0xc259f74b5d9c27eb,
    0x258cb4e14892fd35, 0x483ba9d1d3ab26f5, 0xdfb6e41ae152f9db, 0x1d6bc49e6ce28947,
    0x831245ef5c8fab49, 0x19da34ec47ca962d, 0x8ec6a4253251c48d, 0x85c29ebd1df52c4b,
    0xa236c74dab6ed123, 0x4bc783613b1967ef, 0x629e73d838c7bfa5, 0x3d64c97adb647e53,
    0x26ab94c17ae6cd8b, 0x3f1ed76269374fab, 0xa32fe916ca745d9b, 0x4e6dab7c6a19f4eb,
    0xc9683ab5a45678bf, 0x952c837b38b1eca5, 0xc95d72ea1bca48e5, 0x74be9d838d2e7fb9,
    0x72c5d6af234f76d1, 0x3c641faedb5c12a7, 0x7d59f38a9be26acf, 0xabd9853c82976bd3,
    0x98b653dabc346fd5, 0x5d93e1b4d67ba48f, 0x35cfe2a61e6a8f9d, 0x38217d6c3cfa8749,
    0x2b436ef89dcb4f23, 0xb914ec525983d4b7, 0xd41c7289387ac921, 0xbc2a6789216ad98b,
    0xb7f1ad634351d6a9, 0xa286dbcf126ac43f, 0xbf1d697c6c83fb15, 0xa8fec9642863ab95,
    0x2a4bf37e27e18cd5, 0x2e34f15c6ef872ad, 0x457d296f38adc71b, 0x7ae93b41ce41fbd9,
    0x96eac527dfb18ae9, 0x98ef34d293c56a8b, 0x12e4b59f6cd98ba1, 0x18ab257d8bf7cd63,
    0x23b156c7265ea3c1, 0x1f8d62498a2d5b49, 0x1375e8a6a1d46235, 0x96ef43a1fc3b74ed,
    0x98b7fe4165be47f9, 0x63789c1a1a8469cb, 0xd2ae6714e6415fc9, 0x581f7ed376e2198b,
    0x5e12473a7813e46b, 0x791a8654f728e9cb, 0xc17e5a326f48be5d, 0x584d6fbea46e857d,
    0x5f8bdeac87e54921, 0x69f321bef1c5ab97, 0x952f16ac6895b3df, 0x956ef1ab7c6ef51d,
    0x16bca2efef85d26b, 0x5461bdc212f7db89, 0x23e5f94a8ceb21df, 0xb1a5e324a6ef2b91,
    0xfc749ab32e6a5df3, 0xbaf53421ac37d469, 0xca37edf6c4ba7d39, 0xd53b867938fdb1a9,
    0x517f48db9d7f3825, 0x58b167fa82b9a647, 0x49dc6ef3763ca92d, 0xc5a26e9d9c3f81d5,
    0xed13b458658d49b1, 0xe65cb2937ed628f5, 0x124bf79d5ad26ef1, 0xdc2e8b451e4ad97f,
    0xfdc241a7a9fc8b17, 0xa1bd2ef47ab569f3, 0x4b5916af14c9fa83, 0x5714fd862981df53,
    0x6abfc417d8e914ab, 0xb1f453cea1c4985f, 0x52a96be4731b528d, 0x4be215f9521f9ed7,
    0x5c73264b59d61ef7, 0x63125bdfc2dbe547, 0x2be167dc274b6c5d, 0x3e51769ac9ad17ef,
    0xeb48f236bc472f39, 0x1fb3c76d32db6ac5, 0xdacf2e184b236e8d, 0xe42f1c6b9e8c725f,
    0x8e21a5d49e58a4f7, 0xb71edf3cdb3a5ef7, 0x267d1fae273ac8d9, 0xb5c786239f68acb3,
    0x46a2c9b32c489eb1, 0x63d2c8753d2e49f7, 0x9af7eb3c83db6fc9, 0xebd29f3c7134ec2d,
    0xd3795ce25a8de127, 0x514bfde36194785d, 0x578dac1e93ac8b4f, 0x3c2b46e81e58674f,
    0x53b6c724cba1e97f, 0x249e85c65ecb1469, 0x8ed7632429e8a36b, 0xfd1a896e48c65123,
    0xca81569fe5823f67, 0xfac93eb89f3a1d27, 0xe52fc376b7e189d5, 0x536912ba32a61c9b,
    0x91abdcf32d458c69, 0x6ba45cf17cfa2d61, 0x37da614c9371dbc5, 0x786fa29dad768495,
    0x54e8d236a613e52d, 0xef235a4d8963ad57, 0x652bc713fd2a8b53, 0xe5b7c9a8629d4aef,
    0x54dc32a6c956b2d1, 0x3987f52d194bd863, 0x6594fceba3f7c65b, 0x876ae123b2596aed,
    0x53674d1f3ce5fb2d, 0x5c2dae831856c9ef, 0xc5864feb368d4bc9, 0x81f4a75941b7f329,
    0x82371fbe6234791f, 0x92d43cb8acf6d583, 0x6198be232c54a897, 0x312b75c89e5bfac3,
    0x5f4a862e4c25e613, 0xbca81937941cf5ed, 0x6fe4d8313b51ae87, 0xdf293c5482cf391b,
    0x271ba9c4c5d3a47f, 0xd1c64b394169723f, 0x51d79e3281d65ce3, 0x2d9fe173d1ca7e6f,
    0x968457e38a6cf719, 0x27b1ec493526bca1, 0x93851d675cae41df, 0x132847cf6a9d83e7,
    0x268b17ce9e3cdaf1, 0x62571d48d4c632e1, 0x73958dcb1df2bc35, 0xbf194e36c713945d,
    0x32a564c9f9e375b1, 0xdf864ea5eabf1d93, 0x3ad6e5f2e6245f93, 0x7561b9dfc529d7e3,
    0xabfcd453a87c5491, 0x918f43b75b8926a1, 0xa142b93d1fde3a65, 0xef26abc7f72de849,
    0xfe6d35794c67a52b, 0x8a4c625b9a6c1357, 0x789de31c915fea83, 0xd96e21bf69374a8b,
    0xe4fd2a86143da627, 0x5b4172368196472d, 0x928fdbe7154d8aef, 0xbea419fce89a3f47,
    0xd715a62cda841623, 0x817a96df7ef1a463, 0x18765a2b8c4a9165, 0x5dae61939261e84b,
    0x7845261c8d7541b9, 0xab748915a58472f3, 0xa54bf19c9adc723b, 0xfe25cb38e1a7bf89,
    0xec5ba9f48dc193b5, 0x5fb9176edcaf8461, 0x56231d9ad5be6173, 0x6b451cdfcd83e14b,
    0x1c7a34eba9fc248d, 0xcb7f683de41f57d9, 0xb87edc1a2fb47dc9, 0x7ec18f3dc74a28b5,
    0x796cdb81a76e1b29, 0xb346879c8b2c6d31, 0x768943da7ac942b5, 0x5e24d1ac7394186b,
    0x6f8b45e7d6c92735, 0xf9c3b2e169fe7ca3, 0x174e59626bc2547f, 0xb5e7d9fc54edf3a1,
    0x3961bcd4589b231d, 0x4ecb6d9181726dfb, 0xcd5972bfd61af7c3, 0xc3d986715bda8f13,
    0xfc731ed4ce4f68ab, 0x3214d5a7af18c657, 0xa32d71be1e935b2f, 0x47ba3edc7941dceb,
    0x439b6d7abd1c63af, 0x9c81b725c6ba4529, 0x137e86ad527afec9, 0xe1cf72da9138efad,
    0x1abc7fe9ef9536a7, 0xdcbe4287374981cb, 0x654c18be21e8634d, 0x583d2b7af2da46e9,
    0x28d1cfeb956bc1f7, 0xbc5af84e2568f9e3, 0x19d674fcef3a5461, 0xa8bc7915b2efa6c5,
    0x1865cab73a197b2f, 0x3e7892af12647895, 0x34edc5a1e34f951b, 0x4fc3d1282a7456eb,
    0x45361bac34916d8f, 0x36ae2c785c87634b, 0x89b37e64b2c59e71, 0xc63b4dae21be6489,
    0x431eac897c5d1e29, 0xb34da18976ba93c1, 0x167983d5b6d42175, 0x216ab49e6dcf7a59,
    0xac3df152564a7c91, 0x9b7d4ae626854edb, 0x8276e15fdc9e763b, 0x831ef2a4d658341b,
    0xfac1398dea24c875, 0xc83f467ec5d7a629, 0x46125e376e7143cb, 0xc453719b584b7de1,
    0xfdb15e3965f327e9, 0xa1e295873bd76f29, 0x26dba3c7c89316fd, 0x75fc8d12d269eba3,
    0xa7df51824eb6c129, 0xc4329ad1f471c9d3, 0x8f1c23d68ad61b39, 0x1d62eb939fc781ad,
    0x2e45fb96fb7c3689, 0x97d8eb2621a764cf, 0x96dc413f32586fab, 0xf3251c6e81bf3657,
    0x17f265ec3ba5ecfd, 0xd15943269ad54721, 0xd527e3c64c7a1d29, 0x9c18f62a48d291bf,
    0x9acfbd6795fce341, 0xca1b824ed7b28943, 0xfe236c5734af2859, 0x5fe8d6914673a1bf,
    0xfdb7a5618d2b61c9, 0xce489d5b98a327cb, 0x89a3d275bd246c35, 0x427e183d6ab9724d,
    0xd2b8e9cad3af9e75, 0xe17ad9638912fe7b, 0x27e8634a3951fad7, 0x9d2654ab348f72eb,
    0x8b693217ced2a94b, 0x87b6a4f3be13745f, 0x379bd586139e5af7, 0xdae4756be831fc6b,
    0xe58764c95147e6d3, 0x85e943b6975b68c3, 0x514783f638ed64a1, 0xd4ca9b1eb13d2c49,
    0xad1634e587fd3b15, 0x1b6352cfdc652aef, 0x84365fda275d68eb, 0x6efacb352cea41f3,
    0x45dabe93d63fc927, 0x1795d2ef73d2cf5b, 0x8e195bd38bf26d57, 0xa3618e2ca7e3f659,
    0xa43d29fea78d2349, 0x7e62fb94fb7853ed, 0x941e37d6f4e38c6d, 0x8a64b3f1e6325981,
    0x3a1cdb852c394587, 0x8e571b3c93268ecd, 0x358cdf2b75312cdf, 0x2197edbc6c8e9da3,
    0x6c98b572ab81c5f7, 0x9cb461da348afced, 0xbc467f2de9bacd2f, 0xd541e3c2d6937ab5,
    0x4c7e6b8538527ecd, 0x194bca364ec582a9, 0x52df136afd2641c3, 0xa2d8ce135d31b4a7,
    0x8dce562981ecf267, 0x9f8ae1b412f8e9cb, 0x641e275b53d4ec81, 0x6813c257abef3c45,
    0x3a5e2db9c678d4f5, 0xf1c2e8db574ec129, 0xf9b4a123d1e4c835, 0x8c7b59afd61bfca7,
    0x5c9218de78691caf, 0xd4be791ad8a54629, 0xac26183fbad2731f, 0x57de139b8e52a9b1,
    0x1c3f824569a5e743, 0xe29ab5c15dc4b3ef, 0x5be7382c97a16cef, 0x68ca345b734d9b15,
    0xf75db6c83c62eba7, 0x93afed61ca6b1d53, 0x3afbe49c834c1f9b, 0x3825b6d7684df5eb,
    0x7df64ea571cea8b5, 0xda69f4c1687dfcb3, 0x7e3462ad4c8d19a5, 0x58371cb64c6df129,
    0xc3fbd51a62739e5b, 0x624e1c7f7e624acd, 0x72c4dbe59f635abd, 0x46d157c29a47e1fb,
    0x89e713b4832a4ed5, 0xf2b6954c7f31b48d, 0xfedb859ae1b5a4cf, 0x5371bea42edf6357,
    0x4af1e938da82eb69, 0xd3ebf58ae97c351f, 0x8634ea5fb6812aed, 0x712a46b369d81475,
    0x357decb6ec1b674f, 0xc283b75df1ca68e7, 0x5bfca268751ecdbf, 0x478e1ac9e13c6f47,
    0xd7c1a2b38a9e6f25, 0xcea97465dcf9a231, 0xa8b1962564fd5be1, 0x2b74ca3fedb9a53f,
    0x813c6db5214bc76f, 0x92a7e53f58239a1f, 0xc9d3ab629b587e41, 0xfd1267e9ce98d16f,
    0x9bed354c4ea8fd35, 0x12ca59db8cd97e35, 0xf3615e9bc986a5e1, 0xf37be6c9497ca83b,
    0xbfc23a5db491e3c5, 0x4c6b73e168943cf1, 0x4ef1cd8952fda4c7, 0x19c3845a3af4c1d9,
    0x75beaf28e351afd7, 0x4683fd7a326fe89b, 0x793a2fb4798d24c3, 0xa1e62d5fd812be69,
    0xb693c1f73a1847ed, 0x86b9d351218ab74d, 0x541dbc6a587b9adf, 0x352d7c6f2c68a791,
    0x6f8bdace73eb6ca5, 0x48279ab5f976b4ed, 0xe8cb3af75d26a4e7, 0x3f789a41d5f876a3,
    0x2facdbe32bfa469d, 0xef986ab7e3c26791, 0x8c4ef2dba371ebfd, 0x3924dca6485eb67d,
    0x5dc16e8235e6978b, 0x6912abe5dc3b5821, 0xb487dc9f3a4d86ef, 0x83aed65727a68e51,
    0xc6e48b258dbc9e37, 0xc1f7bd93eb127953, 0xab849627ac894537, 0xbd1467ef4d2fb815,
    0xdf24bce5d3eba721, 0x457ca93d815a6c47, 0xdbc9685fa9f1de4b, 0x3e2fb94a7b9c6ea3,
    0x38e75b12fa71d295, 0xb156f42753aebcd7, 0x43e2c1f8b2ce5617, 0x71eb4d52c1d894f7,
    0x8345abcf829b4c67, 0x178a6e2342bc57d1, 0x529e1dbc2e364c7b, 0x3921a85d62e5ad43,
    0x7e32814acfb6d429, 0x9712de5fa28ef761, 0xf9cdb6254fd8c7e3, 0x457fa8bec294f581,
    0x39f72a5cf6d27ae1, 0x475816fc1e28c6bf, 0x6f4a537b169d54eb, 0x748b391e7143b9af,
    0x7f129b6d62ce718f, 0xb47f985a17c5d249, 0x1564a783a9e7365d, 0xd4269ae1ce85d497,
    0x6ecfa2b8c1a24573, 0x98a31d7c3819ce4b, 0x142f83b74d9bc1f3, 0xaf638d74b2379de1,
    0x74c52dfbe53c6daf, 0xb6c45e797a821c3d, 0xa269c4f8579bc4fd, 0xecd36b1218f974eb,
    0x4d25831f2a68bdc5, 0x25c31ab6832a5bf7, 0xdb86a2e938c5fba7, 0x694fb8a584ef1d39,
    0xd4821efbfb2ce497, 0x237b6f49c87f364b, 0x794cd5b19156a7cb, 0x3dfc98469ed5a743,
    0x469f23cb7ea1db85, 0x17a3248ec9e6813f, 0x2975ea3b34952ad1, 0x52ef71ac3145a2cd,
    0xa1d89fb4be4cf867, 0x73fac62e92b58de7, 0xd92cab737c93186b, 0xa53db719d5f87ca1,
    0x453e71ac9582c7e3, 0xe5bf4da21c3db795, 0xdc3e4f76b627dc41, 0x142e6b832b743fe5,
    0x92fb86a1f9e825a3, 0x37948c2bcde9b815, 0x14f865cb45c21789, 0x9e38fd5c734958d1,
    0x5f6ac23ba948e75d, 0x487ed52bca4b962d, 0x64315a8fc7b52df3, 0x3518bc4fab27c86d,
    0xa15c489b71cf3a95, 0xdb6185caf5eb21c9, 0x4e9f8ab35a96218f, 0xb369eaf1586f2bd7,
    0x9b15d4a81fa685cd, 0xa4ecdf1b48c197ed, 0x5931a6fd845b712f, 0x6a1d8ef2c936bd57,
    0xf56b1293a4973521, 0x6392f14c3cafe457, 0x1e5fd3a73e6ca95f, 0xfb163dc7dcbef973,
    0x93fe2c68e864c715, 0xdc821f56cf1ab823, 0x938d742aec41857d, 0xe658134a9e3f841b,
    0xa13bd48fb3e462a7, 0xbc9da475e51dc49f, 0xac4b5d6ea2fb69ed, 0x971f23be9ed67ca1,
    0x513e4962e34c1ad9, 0x9a1cd2879c876d1b, 0x1695fceab348d2e1, 0xbf3c5841bfeadc63,
    0xd45a2cfb9861ed2b, 0x456aed3bf46b2da3, 0xf7ecb82af69258c7, 0x75cab91f74f86d35,
    0x3f615deab2165947, 0x7bc1eda831b542d9, 0x9b638fe7346deaf7, 0xb4293d7e72a658d1,
    0x58dc16f71a28c94b, 0xb8647213c384f729, 0xb38cf74943bd5e17, 0x2f1345be1ec967ad,
    0xa4f6c1d8b1f94567, 0x45ed2c93d2834bf1, 0x26abe5182b548f17, 0x378be9d15d123ef9,
    0x7685a1d9ab4dc139, 0x28c7d6a1a643d17f, 0xd691f4ac4d185e69, 0x137596ed46dcfb79,
    0x59486c3df432cb1d, 0xfead9461ab9d8351, 0xae3df918bd2745f9, 0x6c53b14a4df2c875,
    0x8ed294f75fb86e97, 0xf2ac5b93e5812b3d, 0xa5d7f6b32d3e7bc9, 0x4289e6f327c413ab,
    0xe6bfa82d25fb1a83, 0x9f6438be9c71d2a3, 0x861b5fd3a813f5d9, 0x4f615ad891e7ab65,
    0xd21cb4fe2a5d64b9, 0x16328c45ed746b81, 0x36c475b126e57daf, 0x7812ec435ba4e987,
    0x19d72e8b267dec85, 0x2b1cf4767af841b9, 0xfb5e4a184f621753, 0x98ebfc57caf92b45,
    0xca5be16812a89375, 0x856e4d3c413bfde7, 0xfecd5a68a128d9f7, 0x4782ed567a35d8cb,
    0x4a6dc195432f98c5, 0xe8f3476b562d89eb, 0x5ac4872b176b4ca3, 0xdceb489a67b92fc3,
    0x15c74e9d96ba52e7, 0x3bec92a841e5dc39, 0x86341c27597e6cf1, 0x6bc7ad181d2fc473,
    0x2a8c4bf962f974c3, 0x814cf73251ce2d43, 0xf257e3dbe86d27a3, 0xe4378c65a8fc9de1,
    0x3b5e4a6c8af21e95, 0xad7e34bcbce65319, 0xed2a87161fc7be49, 0x58ecfa37e9413c2b,
    0xe7a48c3698b461df, 0xb3918acd953ed241, 0x7b89ead326dc45f3, 0x89be457f9e7fa6c1,
    0x24f19ea37ed9354b, 0xb3c92f51c7eb6a43, 0xf324c95b1284ab6d, 0x9b6ed5cf24b873fd,
    0x571e28391d897f3b, 0x756cd812b9f61c83, 0x8d4f9a752adf6e8b, 0x1e72b38af254c3bd,
    0x3d9875b192c1b8a5, 0x1af5897e524febc9, 0xe9a13b42edafc487, 0x1afb4e624b679aed,
    0x16fce2841bfe5d47, 0xba42361c9efa1327, 0xda67f89326becf81, 0xf7bd184a1e7c2d89,
    0x8263b7ec2945efa1, 0x4adc2e7f27fe483d, 0x4f295c6b1e863ba9, 0xcbeda4263e41d5b7,
    0x9d143cb853e6da71, 0x91d46a8e6f42d957, 0xaf173c829a762145, 0xc9bfe26a189b7dc3,
    0x28c64de9d42ce3f1, 0x1ac67945fcd64e13, 0xac1295df24c85ae3, 0x5efc7342eb548c63,
    0xc6ba9518fe6294b3, 0xb3cf5a723452b1f7, 0xd6cf7e1bc1edf983, 0x8a5127be421a86cd,
    0x76934fa5ecf63781, 0x1f3697b49862abd5, 0xfc75a968251ac76f, 0x1376d8fc62d798a5,
    0x691ed8bf64efa57d, 0xed9c8a6f84651b3d, 0x5be13f79379d64e1, 0x5a97381e8ed71cab,
    0x1753826f6bc72913, 0x94fe72b164d9fca1, 0xb4782fcaf736d825, 0x7bec3a19c6247e8b,
    0x5d4a231bd73bec81, 0x5891a72f38cdf721, 0x8f4615e78f5d4ce3, 0x41e5df8651b478cd,
    0xf3819b451c4df7ab, 0x71cbfd2565e37db9, 0x431ba6de3e2a6c89, 0x74385a21d3ec49b5,
    0xdb5a142fb16d35e7, 0x358e41da5918a3fb, 0x1bf86e37f15bec4d, 0x67cd89a5f1d29a57,
    0x82e47b6163254afb, 0x1ec54a298764cba5, 0x6197c3a2f9de18b5, 0x85fda47b9f718e25,
    0xf597adb814fa3659, 0x1ace968f92ea36cb, 0x13d246fb3687d195, 0x641b58cdb63fca5d,
    0x8d79ac54625ad187, 0xc6a39fe5d7a8b2c9, 0xa91326cdfda2b579, 0xf2ca5db818ba6f2d,
    0x59c3e267f269d4c1, 0x6384ab1e4f978a63, 0x37d65c82ad6294c5, 0xed59238792facb53,
    0x24c8753972a869b3, 0xfc7ade46a1b58d47, 0xf35b62c173dbe625, 0x4e56afd36a912be3,
    0xcb723e8afc28a95d, 0x398fc72bd4963cf7, 0xf9b35146a48965fb, 0x7482ca368941bce7,
    0x3c867adbdfab5c47, 0xcda84e76ca18d94f, 0x249be3a8dea6578b, 0x2d7ba51f3562ace7,
    0x3c4a2d912ad8935b, 0x1b923c6a723a84c9, 0xcad86e13efadb543, 0x6f412e7546539f81,
    0x69ec327a2ecf347d, 0xad74e2fbdf846729, 0xa74bc63ebe493fd5, 0xb5617c4efeb87c4d,
    0xa2e84795ef876453, 0xd6b5ce4912bef465, 0xa347bc68b857c69f, 0xc48e76d37e934861,
    0xc91b73fd2bad7965, 0xe69a534f34e927c1, 0xa45efbd764a38f2d, 0x1c35489b483c617f,
    0x84f6b93de18cd9f7, 0x1f9bc3a5a2c564b1, 0x26f9a137ec145ab7, 0x9fea6187216bda39,
    0x631a59bc8fce4d67, 0x4193d52f48691ead, 0xeb3952f86b8975ed, 0x7f3d4b269b2618f5,
    0xc9675a2121368d4f, 0x627f4e3cd496fbe3, 0x8e975d145182d39f, 0x8b4a2e7cb2981f45,
    0xd568c9738a9de2b3, 0x4a713c6b835261a9, 0x47a6251e2843ec6b, 0x64de9a525f897143,
    0xb4721f3d36f89427, 0x3b79861c69317c5f, 0x68a7f9bcad17938b, 0xe5698d735f6ec87b,
    0xbf9c64717edc2965, 0xef8914d67e59ac2f, 0x87fbd423e6a42589, 0x9f645128a137b94f,
    0x798ed64b815f4b63, 0xbd52f418ca6f3e1d, 0x1682b539a34c781b, 0x5e489cd265be47c9,
    0x853be9ad6ac3e18b, 0x23ce4968abc9f8e3, 0x315dfe7632a4bc91, 0x62ca73d5ae9824b5,
    0x87af5c32e54a7819, 0x695f2c3172ab15ef, 0x43c526e1ab3ef6c5, 0xd45e16823def2b89,
    0x94de2f6bec1675af, 0x4ae2fd65f1e2b7a3, 0xd2a6834c25de93af, 0x41fa9bc8ca758ed9,
    0xc3dba845e5c391db, 0x9ac354d86f941a53, 0x29b48fa5e693c2f7, 0x15d9b46fbd875a13,
    0x6edf14a948b5ef9d, 0xd93fb458e56fb9cd, 0xcfe16723fa87b4ed, 0x4986db1a247e68ab,
    0x9d142eba7235c619, 0x4689acf2983c5d21, 0x49ae3b2d8cd21eb9, 0x38de5f6ca38e76bf,
    0xe62718f4a5e2376d, 0x28ac9d7bd647fca3, 0x5ed14cab321a4789, 0x2c4f7a31c1d2487f,
    0x316dbac9d4738e2f, 0x5239bed7ef4b5397, 0x782ab14e865be9c1, 0x84ac59bda273b8d9,
    0x2b6d19a31fc29785, 0x26735cef49281bd5, 0x93dc5f7689fc15a7, 0xcd3762ef67384591,
    0xadb9625395821f7d, 0x9ec58d767a92fd83, 0x4afe56312eacb8f1, 0x692a34b8391e4ab7,
    0xfb91657365239bf1, 0xe4f3b15274e891f3, 0xe49b1a2d5df4a69b, 0xbe24df1a3f59e467,
    0x46adb879f79a3c1d, 0xd9b64f1ca93e24df, 0x2c761fea6e8fbc31, 0xe9f367a4764a3fcb,
    0x1cf82e35142dca87, 0x143e782b253cf74d, 0x2467ce19c715f429, 0x6f9c18de371cf95d,
    0x24fd195875a8ce9b, 0x365af27b14968e53, 0xf4b7acd34129ab3d, 0x84a57d3e6a8432e7,
    0x3c6fb98d85e4a7b9, 0x56e4f3c842fb1c35, 0x4e71b823472dca61, 0x56adb1739ceaf58b,
    0x65487fd9af456391, 0x5e2317d87f8c51b9, 0x852b7ad1f96eb18d, 0xc6fed45ac1569483,
    0x285cdf678e629a7d, 0x476c285b15e42c6d, 0xd857e6b2ade693f5, 0xf385e27b1746e8db,
    0x35941fe7fab61ce9, 0x2b4879d5afe741d5, 0x18675fbad1394765, 0xd42a5e16158c397b,
    0xa61238c5e297a8bf, 0xbc8d4179ce52b867, 0xeca986fd48fd3ab9, 0xdce4b1791b6d7f29,
    0x51c3d92fbf215763, 0x59bda648d3c487eb, 0x7fbc1de56cf58917, 0x8c52a3e1a6b293d5,
    0x735c2b8625e314c9, 0xa4b835975f63db47, 0x69beac75a625ec1b, 0xfdeba4c5c49d3b7f,
    0x49c2d57b83dfe725, 0x862dbea548c6a31b, 0xfa9bc4159574fa63, 0xb542a97edc47a9b1,
    0x2a5ec976d59e63bf, 0x58321cbf8ed3a7c9, 0x54c376e1f48d761b, 0x76bda5c39dae5cf7,
    0xfc85e4a1fa27e149, 0xe5d349723c48fdb5, 0x5c971624645cf731, 0x4c8d57b679e48f63,
    0x2d81f6a34f8926ad, 0xb1ef4a964c65fa2b, 0x756ecf49ec6a31fb, 0x49235c87a415cb67,
    0xf9ed1745d28ce571, 0x84dfae195c6eb4a3, 0x513ae67fcae5894f, 0x2c197f6d39afd865,
    0x41fb893c967bfc51, 0x8e36241a53e4678b, 0x68af9725f86e2bc7, 0x87dae2c621a8735b,
    0xde61af7c67dfa859, 0x281975ce7e6bca35, 0xa569fe12cf1b4de7, 0xce698f375a4cfed7,
    0x831dfe5c195fdc67, 0x785b13ae4a8f6be5, 0x6e81acb2b42cd5a7, 0x142f7bd82358ec97,
    0x384c9d6ac5862e3d, 0x7f62a9848cdf6a19, 0x24dbcf3684e51c6f, 0x52c6e718a5768de9,
    0xeb52493746bcea93, 0xd524f6b8d8c17693, 0x48adb529764bc3f5, 0xb924ade58a61e3d7,
    0x5f893e4b39514c6f, 0xa13c4859e4a13527, 0x31e85c7f2f167c95, 0xf9e813a7a76983bd,
    0x1a2e537861f45ce9, 0x35efa947d4b68931, 0xd5649c7178fda9b1, 0x71b9324ef729c583,
    0x826bcaf58d9cb25f, 0x62ca58d46cdab297, 0x6fd8be53f3a21de7, 0x8c2bd94749b7edaf,
    0x47d9ebfa869da45f, 0xa81376ef9cf3e425, 0x13df7e2a1ae7395f, 0x5419cafd48193765,
    0x2b9a64dfdc16349b, 0x9ac7f345367124c5, 0x5276ca93ec63bd89, 0x91c7d3fa9d26e5b1,
    0x6c2735ed3ec79baf, 0x5f4d97613fa8256d, 0xea175289c9583f6b, 0xf164bcd23a51dcbf,
    0x8b4ca62df3461895, 0x571b2f8d469758a3, 0x2461379d4723568d, 0x712d54b9b13df469,
    0x4f37a95b53f24c69, 0xabc5f816e8ad41b9, 0x3ad8e42f3c174aed, 0xadb7934efabde843,
    0x9e5217a46cb2e137, 0xe25cab36a6c17f59, 0xeca185465d6ca7e9, 0x27e1f4aca7ef5d21,
    0x5716f8a34adb8365, 0xdb8a631416aedb49, 0xfb2731adf43c82b1, 0x94385c1a68ce4d95,
    0xd7459b13a689524b, 0xc56d3bf878df3a25, 0xec6f342d29d8b1c3, 0x83fdab9591b47ce3,
    0x8ca3eb91e8b61529, 0x163c2d4a69f8b47d, 0x5eb48fc1493a1fc5, 0xe2514fab8bc326a9,
    0xbc1e7924cbe6f93d, 0xb57e9342ed285647, 0x7ab9123f96b2e5d1, 0x3ba47e6876ac14d5,
    0xdb76153c5946a327, 0xd47ce85bd684e1f5, 0xafe832142c384fd7, 0xea6c1d89721c439b,
    0xbed1786acae5273f, 0xfbe1892a5c64a9eb, 0x8ca7b2f3ab578f2d, 0xd1c29b479247c16d,
    0x126c934b39bf7ae5, 0xe3fa29b192137a8d, 0xe846a19f318a79b5, 0xcf72a84dae49c87b,
    0x3ecf8254ba5723ef, 0x165e934715ce62af, 0xe3d689519af4d367, 0xefc4893bf8ace149,
    0x9f167e48753f928d, 0xdca23b961486ae9b, 0x37d2f961e42abf59, 0xc49b83ed9c47a35f,
    0xf612edcab8e2cad7, 0xe6283cba83ce576f, 0xef4b62a39e36bcf7, 0x43f6e9b5e319fab7,
    0x6d2a78f4c4526d81, 0x8bf7a53ec8617a93, 0xc5a4fed732675ceb, 0xf3b9d52ec7d1ba85,
    0x5a34fbd15436adc9, 0xc38f2491298b7daf, 0xaf2d758315bc7fed, 0x45fbc3e74986c7fd,
    0x9b1546ef93cb64e1, 0x4e7fd352c2fe7853, 0xde6fb81768bfae25, 0xcabf2793ef869423,
    0x7de24b3cf8abe423, 0x5738a1e4a78fbe13, 0xfd18e67c143f927d, 0xc658dfa7df327c8b,
    0x91536b475de4bfa9, 0x57f19cd6e465379d, 0x691de7b31fdc5e2b, 0xd58e63471564efcb,
    0xaf3896e2364c872f, 0x69c3eb757528ca1f, 0x8139a4dc5621a3eb, 0x26d38a7f7f58a943,
    0x5369e4cd2fc48971, 0x97e4c3d1ca1e729f, 0x19a5f638769c5a3d, 0x49ecf6b1b1953e47,
    0xdf421eb94c28e5d9, 0x63c8b1a7e387fd49, 0x9364ac1e79da4ec5, 0x1d79c5843a491f2b,
    0x1cf73bd86b9cd73f, 0xc8f673945ec9b3d7, 0xe97513dcf1e7693d, 0x8ba3fe969a42be83,
    0x2c3af5e1df49aecb, 0xf52ca697afe32b75, 0xf164ca5d2b75a1cf, 0x8e3a5d72e2438d95,
    0xdfc52694d6ba7c2f, 0x67ac8fd9ec43fa6d, 0x2b6df5ca2cb869f7, 0x8e7ba1549ace638d,
    0x613dec75f6824b39, 0xabce81d298e3ca15, 0x276f3c5a69ed7b3f, 0x3e1ac76262d81439,
    0xbce149ad15f84e9d, 0x92ac78f496521f73, 0x1e23a89f15b8e493, 0xea25d183fce76345,
    0xe2d356f12dec9a35, 0x2d3fb817346cbe2f, 0xbe41986d1c486def, 0x2a64b97cb38f4a51,
    0x85f91adcd8ecf953, 0x14289ae51c4fea6b, 0xe21597c86a297b15, 0x6b981ca5c7e49ab5,
    0xd4a1563fd67cf4e5, 0x97c14d5fa2754d39, 0x56df4187514b32e7, 0xe89c317afe783591,
    0x569d83f7491cd283, 0xcd94825b14c28579, 0x1e294ad6de24fb15, 0xa793cf15cd698ba1,
    0x58dc642ea9e73d41, 0xe4ba5df9ae24bc85, 0x4b9d32861962c7bd, 0x8f15937ead64cb73,
    0x958126f7e3621d49, 0xd35ec491712eadb3, 0x45da3c1939862f75, 0x6c25a78d924d7ca1,
    0x528964edb4156d2f, 0x285b97f6d82467fb, 0x8a21375c6b2af91d, 0xb2eca63529df7a1b,
    0x28eaf76bfc476385, 0xc2a3791e5c478f1d, 0x86a149b264fd5a13, 0xc2e315b94358ec1b,
    0x2bc146edc1d56e93, 0xe8231ba9593fd1b7, 0xd71a958fb368acf9, 0xa4659ed3ab571f43,
    0x51e6cf2b5396e87b, 0x73e1d26b9154befd, 0x652e4fc345a68c91, 0x2bd57c39df2b5a37,
    0x61c2b93592c1657b, 0x1ba8df47c1d3e597, 0x435d9ae1382abdef, 0xfd3b7965e7c142fb,
    0x39548fd6c4a1763b, 0xc7e5bafdfd6c3e49, 0x6c3784d1b9627c4d, 0x8cab2371e468b591,
    0x85269413ca13594b, 0x4ed1c573c124dfb7, 0x6ab732f5f263815d, 0x183b4695a7b5e94d,
    0x8b45af1767a5198d, 0xc2ba1de4be519463, 0x7259e83f2ecad369, 0x25baf13e18e45cf3,
    0xc9657de3f2bdc657, 0x6ebd92c7bf8dce17, 0x23f7ab9d31eac847, 0xb8d1fc436b5a1fe7,
    0xb5f31ae2de3bc4f5, 0x76183afea5edf21b, 0x3adbf146162c7fad, 0x671589b4e867f921,
    0x96d7ae25ec26d17b, 0x6dfbe1a731578a6b, 0xcf1a5279df87ec53, 0xc542afebd28a513b,
    0x7f9e5c8de6bf34ad, 0xefa427b8af23d1e5, 0x438dfa5b495fcd27, 0xcf859b6de32768bd,
    0x4dac596215f8b467, 0x6213a5d754e261ad, 0x5b4217d614f3579b, 0x876cde928571bf9d,
    0xcde824fba237b95d, 0x7a19832d35ba126f, 0x25db6fce2e5f1da7, 0xc594e3d75a74692b,
    0x18abdc9549e3b817, 0x45fe76db5bfae893, 0xc63ae82595fec213, 0x3a62b7d9583b12ed,
    0x4c15293d3eb7fc4d, 0x5d471c6ae863b279, 0x56d87ac9e6f4dc83, 0x47f352ea89a546c7,
    0x97c2d168739a4dbf, 0x5b37c4df64cdb9ef, 0x7e5bcaf97bd514f3, 0xb785d3163c9467ad,
    0x3a5b2fed341d97bf, 0xd18ea9647186a4f3, 0x863face2a6f1c827, 0x53487fe2e4df9853,
    0xdc31652eb15fe79d, 0x753689e23f5a1eb9, 0x12a5f4767923a41b, 0x4581ed6a6b2fa371,
    0x75f3481bca8b43f7, 0xac4bd6f5c7bae49f, 0x8a1e95b7c7d2f683, 0x1c7b263e32ea6579,
    0x7892ca51bf1375ed, 0x89dbc6a216d23a8f, 0x48d5729fb4a2fcd1, 0x7e834dcfab524f69,
    0x7b1f894e3d57fc8b, 0xae562f48db18f547, 0x1dab96c59745cebf, 0xc2a4f791496dce15,
    0x536142dc14d37fe5, 0xdbaf14e326e59b4f, 0xca71d934fe4129a3, 0x36ae547d1b89c64d,
    0x198ec3d27c58413f, 0xae845361a691d7fb, 0x189d3b52caf652b7, 0xc96ad82164e29d75,
    0x4729bea638e4b659, 0xc86f1b5db61a4e29, 0x25e1bfc93e7285db, 0xcfd195aea85c4e7b,
    0x31d4e57828a4eb5d, 0xd4e7bc3f3ba19485, 0x53678ef13c96524f, 0xc9d418a78cdb47f3,
    0xcd9faeb79283eac7, 0x52a7becdcb8fda17, 0xc6bf3d824bfc5297, 0x18fe9dbcf7dea94b,
    0xca871db5e486c1fd, 0x4f527c36738f4295, 0x2c9b48174ace925f, 0x49a7df25dcf2b8a1,
    0xa5f7c46e493ebd85, 0x8bd37ec9ecdaf271, 0xa892d1e41e3b5c8f, 0x295d831c8f2e1d4b,
    0x29765cf8d7281a3b, 0xb64a7e597ba5143d, 0x4afc12e6d4b6c8af, 0x5a87feb2abd87193,
    0xaf124b69df26a487, 0x6f93ed5469f51a2d, 0xa596f28d84aec1b9, 0xcb8e5d34a196b4c3,
    0x6f92b835968ae123, 0xd45c397b21ecb35f, 0x79d328b475ed2f1b, 0xe4a5fc7618de694b,
    0x7a4fe132345f8c9d, 0x5729b1fc5f9463e1, 0xad82614ec481e397, 0x79cadbe679dc56a3,
    0x41a5e7c6cf5a782b, 0x4a5f1edb29d41e35, 0xadfe3487c53f4a21, 0x5ef34b98c258f6b1,
    0x7215ecd81ad4c85f, 0xd354be97b15d269f, 0xb5fed742b2317c8f, 0x74239dba9b5e6321,
    0x27a583b69e241853, 0xa74c8bd515eb682d, 0x7325ecf847fe2adb, 0x2dab51836c83459d,
    0x2d84c5f3d912f365, 0x9bedf53c9e42a17b, 0xe712bd6a47d29af5, 0xe1293c45aed17fc5,
    0x635b1cfd3f174685, 0x3e124cb5825d3b79, 0xd1ca6952e5d6b84f, 0xa49db62cdca371eb,
    0x5feab182a3f469cb, 0x7cf8943681c3db97, 0x457fea864ed5f783, 0x15daf43b4892cd6b,
    0x89f54ea6b46287a9, 0x752b46cf739eb815, 0xabfc8e6db8e57c6d, 0x169a74d569ef8d3b,
    0xc9748ebf261347b5, 0xb7f2c839c325e18f, 0x16547e3d1b5783f9, 0xd968fc254f53b7a9,
    0xfde5cb391534a2f7, 0x28619b4e15f38a69, 0x43758d2c43b82e59, 0x46c912bf26a7b8e5,
    0x319abf452b56e8a3, 0x834f5d7b57b1c239, 0x37b9fec4dca16843, 0xe9f845bc4c5ed1b3,
    0x567ed32b734e12df, 0x5de16a72c1e7d5af, 0x9f6341273194b725, 0x4651f97bfc748a1d,
    0x6ca4253d2d6af4b7, 0xb34d197efe7438a5, 0x5a8fcd1267913abf, 0x2541a67d4135d9cb,
    0x567dcf91ad519437, 0xd6c8342124c78a19, 0xc18d592e5c43ebdf, 0xf632a19523ef815b,
    0xfc4d158728dba765, 0x2e3dc615d429f6b5, 0x791825ada7e19853, 0xfb18574d3d4287e5,
    0x1ea4d63c7291c6ab, 0x417d83f5adf72489, 0x52fcb69de36f58ab, 0x8c951a76cbd3e647,
    0x41b98f2d6c45d983, 0xb25946782c48f39d, 0xb356c14ab8a497cf, 0x4573c18d4c938f6d,
    0xec815376dce4753b, 0xf62e14b57e245a9d, 0x2376e84bf58123c9, 0x95d1afc3b73e9125,
    0xfb78c41ab3d82c4f, 0x4f357b8dc5234819, 0xc5274bf83468e2df, 0xd27a196b296a47d5,
    0xe93a81569c21e6f3, 0xcb745f82b5ce416d, 0x438a9e5143e9bcd1, 0x41fba7e23bdce895,
    0x834c9be7b31ac85d, 0x21ae6d4964d79e81, 0x75a234816e17af9b, 0xd89f231c4eb38f79,
    0x7d384fcebd284c53, 0x1b4ae3782ec4d7b3, 0x7c42b8658ca56279, 0x215478adbf246937,
    0xb6312a47f957ac4d, 0xba417c9f7a43c21d, 0x831b6ce92a4361b7, 0x1634eabd81d65723,
    0x6f5ec8b96a8b2f91, 0x8b23c9e1fd82bc49, 0x1e9c2f5b6fa1c893, 0x41a3789ec52af739,
    0xfab386d4136fd5a7, 0x7a5c419d5a61c897, 0x715dba29f29d76b5, 0x16ca459fbcd14ef5,
    0x2c38ed468cf7eb23, 0xe5d74f6bf51c697b, 0xad5b84cf3468cab7, 0xda641c7fde3498ab,
    0xa6d4f293a83f6275, 0xc428e5b96d7fa1b5, 0xbed49ca7d6bce5a1, 0xb34e8a1f67ecb29d,
    0x21dacf73a3bde947, 0xb78e61537d4c3691, 0x5be3c6919a2165fb, 0xe53c8b16ef7492cb,
    0xdb789352e51cf4a9, 0xb9e417a69abefc63, 0x9e534cf8d8219f43, 0x794b6dc8489dfb13,
    0x127e5ad8d95426bf, 0xcf7ea89d23e81965, 0xae5d9c838c12945b, 0xae3cf1473e16c98f,
    0x7d9f41b82b3a6f5d, 0xe1dbc76a2bcd36f7, 0xaec45936e7169bf5, 0x1fb5e742f1723485,
    0xa7854ed92bfe514d, 0x4fa56e19e468dfa9, 0x427e689dcb9754ad, 0xd62b5a43214385bd,
    0x4dcea2b3d5e3742b, 0x936a52d15e97fa13, 0x59162e8b4fd9578b, 0x6193ef84e9c5786f,
    0x845f613e4b9185c7, 0xef435978df6e31ab, 0x27da4569b93c2afd, 0x58f2ebcd42f9a61d,
    0x38c49d5e3f26e491, 0x3e7f985a816ae7f3, 0xdbcf5a6e18eb5f23, 0x13b9fa46c7a93d2f,
    0x4c693e2bf16d4b53, 0x9e6f12749e4568a3, 0xc2d4965e2b684d57, 0xfd3958c76fd3cea1,
    0x63e1f427e1ab8d73, 0x3fd5172e241d98eb, 0x8ef43d9a289f614d, 0xae623c49f2a7d863,
    0x41a9fc23f96cb3a7, 0x4fe1239ac63b2eaf, 0xa5fb49e136ea452d, 0xc365f7a1ac1364b9,
    0x2458cbad9f1e84bd, 0xe36d7ac5e8db37f9, 0x74bfcade9ce65841, 0xfbe8a1c49b7adc5f,
    0x179a83fc9a471dcf, 0xcb25a7ed9fa67825, 0xc1d3f98526b7da49, 0x147bd3529c7d5e43,
    0x8f7614e91465dbf7, 0xc2961bdf215863a7, 0x54b1e896513c2a7b, 0x7a2b5fede7cf81a9,
    0x95e4ca624a8c1967, 0x69a4e83f84e61a59, 0x9a26ce1fd8a64279, 0x8c1b4a724d2395e7,
    0xf1b4263adfb7e5c1, 0xf7d13c6bed265b93, 0x72af4e1b5def642b, 0xc5189e7a61fa24e7,
    0xfb9e17a697bf1843, 0xfb7d53416931efd7, 0xe8492a35f35b17c9, 0x48192fcd4683aef5,
    0x571fd2ca57a63e1d, 0x1ba827353e7d1b6f, 0x48fcd762921e367b, 0xaf2d317b1583b2a9,
    0x7eb285139e672afb, 0xe6f3b7d42ec841fb, 0xf3a76c25f136528d, 0x354876e9c653e21d,
    0x2c53ab67b763f1d9, 0xe71f54b3fc723dab, 0xe816c2dfec2d691b, 0xafc89b6d7231d4c5,
    0x5cead792b7c953f1, 0x96472befa2f45361, 0x7564bc21628b5719, 0xaf9614731ac2e7bf,
    0x1a63dc8fc152d437, 0xb2d73f9e78f6d453, 0x359ed42f351267ad, 0xdc724a3ba8d7c96b,
    0xf41bcd36e5376cbd, 0x84ba9e6cea361f7d, 0xacb7d59f946b5a31, 0x258c36bd2dfe8953,
    0xc9168ebfb1829dc3, 0x4ed2c39fefd2c315, 0xe981b45694da5c37, 0x6bad781913dca79f,
    0x9a237d1bdb85f247, 0xc6df32912735419b, 0xb28c1a6d4c825baf, 0xf2c4768192764815,
    0x37cdb8a625fedc37, 0x91cbd364a59ce46f, 0x3ce2a98de64b2dcf, 0x5fc84ab35be1927d,
    0x93b17ade423a198b, 0x3a7e4298d8b217c9, 0xf1dba6458e317acd, 0xca1fb4ed2ec43a19,
    0xd57eac61745812cf, 0x91857afdecf256a3, 0x56ca81fbe5d176a3, 0x9abf546d6f81a4e9,
    0x1ae38b26ba15762f, 0x5e8d432c948a6e23, 0x17e38f6c9c8be2d5, 0xef136dacbc4723ef,
    0xf6e983158eba91df, 0x5d6ec91b34b5c679, 0x93dcf827a62be9c7, 0x67e8ad5f6b83cad7,
    0x49fd6c3ae945cd21, 0x58143a2cf76ba9c1, 0x5c9e328fca8db237, 0x68d3b2ceaf547ce3,
    0x7ab91e6f43fbe291, 0x934d28cebde92785, 0xc8629e4378692caf, 0xbd21e8459c387b1f,
    0xa89671dbc9d17ef3, 0x3a528f6c29bcd815, 0x2a9de835a2df1675, 0xd249e8371f5d8ca7,
    0x2a6c857fe746dc21, 0xdf34ca9734f85761, 0x27dae4f1be54c72f, 0xafe4c6134fae19bd,
    0x2ebd73cf1843be5f, 0x16fd73a2759cf41d, 0xb5ec1a97b4fec7d9, 0x3f9d457e1f683297,
    0xb7a825318541d37f, 0x569ed2838ea17b63, 0x1783a24f4f31c9ab, 0xe765c19b59cd467b,
    0x47d5362a4138f2ab, 0xf6db32ae293f1d7b, 0x6f51de49c48237bd, 0x2d96b8759f652ea7,
    0x37bdc1a2ed589a21, 0xbcae56f2514286a3, 0x9f5b4e182b6e4d93, 0xa1e465d367fe9325,
    0xbe5372a8693784d5, 0x8df9a754b2ca6537, 0xdcfe43ba7fe8491b, 0xc851297a6d5a4937,
    0xa1e549b7834621f5, 0x7f8b153d8de92517, 0xc6a2d84f9732e1cf, 0xe73a964f24db8fa7,
    0x8e3bdf5a435ac9bd, 0x61bc385a925b671f, 0x5dcb2867b3d168a5, 0xb47e85f15a781d2f,
    0x815672fc3f26b819, 0x12c9765eadcbe815, 0x7d9e8c53c894a5e7, 0x21b46d836295ed13,
    0x632af45b7de58a1b, 0x462c7bef85cde73b, 0x6d9ce17a295eb41f, 0xef932b1824df3a57,
    0x1374c92e46cb8f93, 0x3c8df4a1ab62c579, 0xdfe298451a36dc27, 0x53b67fc2fe3c2d47,
    0x264ea315138e4da5, 0xc39165dbcdb2f345, 0x6e941bcab69542af, 0x5efda1b6f37a96cb,
    0x12a6d75ec8147ba9, 0x68e7a9f2fb432e9d, 0xe2346bf8de8b3795, 0x5d7813f9d52b43a1,
    0x8a92cebfb5c6f2a3, 0x82f91c458cb19257, 0x68f9eb4a615acfe7, 0x3d7b9814e46a5f81,
    0x1425f87382e591fb, 0xc57f6d8b73a468ef, 0xcfba73194d6acbe9, 0x93c4bfd86d135e8f,
    0x6db89a71eda952c3, 0xed7c563292abe385, 0x4b1258e6568f72c9, 0xa87b541325ea461d,
    0xbac96e53f6b93e1d, 0x6e27a895823c5197, 0x76eafd28f9c163ab, 0xb7e2cf95ea3db9f1,
    0xe1d8b65c3147ed9f, 0xc84a5623b5692caf, 0x358ba4e728afb7d1, 0xb8e5cd27d8132afb,
    0x46d3bacf7a582fb1, 0x3859e1bd1895da4f, 0xb9685d4e5f2bae79, 0xe63a92b7ce31dfb7,
    0xcb94a7ef1438e267, 0x35f97a12d68a9b2f, 0x917432ab57bf64d9, 0xce48d3794b36295f,
    0x6b175eaf973a682b, 0x1f8c6d935e1f768b, 0xa986cf5eb42c3e5f, 0xb4317c86dbef4a67,
    0xe2d9c71f841ea95f, 0xe9c17db8b895f467, 0x7cfd19a617ecda45, 0x32681adbc9f6db87,
    0x9a2b6ec4e9b2cf3d, 0x5fd36b414c61a95b, 0xdf2abc78fe13d8b9, 0xc731a62f1a7cf86d,
    0xe5da3f7159381f2d, 0x24a3ed986982b7d3, 0x25d6931f8d7b1fa3, 0xfbac582e46f281d5,
    0x8245d7c36235dceb, 0x2eacb6751ce7af49, 0xd5a1ec36ba3179df, 0x3b54128fde81496f,
    0x6d9e237fde6b53c7, 0x7fa682b18cef123d, 0xb1358a9c26dc7319, 0x6d318c2ec8fab1e7,
    0xc68d49e78172bea3, 0xa5d4cb937f3bd689, 0x4126a385ba386475, 0x4d83f279e4cd3521,
    0x3db629e19c256ed3, 0x832bf916a2c897e1, 0x2843e9b7634259cd, 0x819ed357fb431675,
    0x59418ae354fc9ad1, 0xa567c9bdba78e649, 0x7fd529ce46a35b19, 0x978bf1c2192e6c8f,
    0xc7af2e5b96425dbf, 0xc26f1a5e83d4c6fb, 0x9dea7315b3ec26d1, 0xc46d821a214ae3f9,
    0x9e5674b12fb83cd7, 0x3976f541c58a61b9, 0x4c6527db14f8e765, 0x3152fb6891c7a863,
    0x48ac75316e4abf5d, 0x5f16a29bf5a8927d, 0x46e129bfe536892b, 0xdfb63ea5f95827c1,
    0xec7598f489a73bed, 0xbe9c6483654f9aeb, 0xc13a2569b86d2ac5, 0xdb81239e794a368d,
    0x3bf5ad147e3a96f1, 0x45d9cae8a6589eb1, 0xa96fb8472cbf8e31, 0x8ac5de63283ab9d5,
    0x12a879b4947e1d8f, 0x8e7f5d297e12538f, 0xb12c86593965ae7f, 0x36e7bf25498cfde1,
    0x6d431598f5b19847, 0xdfc8459a2518396d, 0x2ab9f583c6298ead, 0x4f31a8b23198475f,
    0x4ef87a631378625b, 0x1ce6824ab54e793f, 0xc2ae1d45d2b4c853, 0xc12b3ae5d425ab6f,
    0x34c8da1ecf762b59, 0xbd32ce48c417eadf, 0xba5ce9df7b1d6e29, 0x9ca23bf7c729b615,
    0xcda1ef98a64d39cb, 0xc3958e41a9623f1d, 0xd73462cf2ac1d5e3, 0x712afb3c3cde1869,
    0x61c8479354e78639, 0xf9ecb6423a2c57b1, 0x267945d38617dc43, 0x9a8b354d49becd5f,
    0x26f41d5767159db3, 0x79e46fdb9d5386eb, 0x26d9baf5745318fd, 0xec1934f5a192dc8f,
    0xae7328561423c85d, 0x5fe7389c51dce367, 0xf5a6e98cfb546129, 0xefc318b274fde1a9,
    0x1ba2fd734572e31b, 0x876d91b4948b1ecd, 0xa3ec769f4d87153b, 0x6f381bc9fca825d1,
    0xca6def24af6241b7, 0x417fba2dea293547, 0xcd4e1fb64d1bf537, 0x598361cd84c52ae7,
    0x19cb52fa6c52eb71, 0x57ea928376f1c9e3, 0xd5326c1afad41ec3, 0xe579af3c16f73d49,
    0x827d91ac79fd3a21, 0x1547d298ea64b2c1, 0x1285bdcf89efd54b, 0xfb524dec3d68abe5,
    0xbe48765a96473d2f, 0xbc984261f9c54ab1, 0xbfa127edb459c78f, 0x92d75b38e2a3dbf9,
    0x57e893c6db1374c9, 0xd7c621893bc592f7, 0xcd9b581afe13852d, 0xd32a817bd194236f,
    0xe2563cab198523fb, 0xaf1e2367e791f235, 0xab68371f1fd2983b, 0xefb912653169efd7,
    0x6a7c24d3ed2a38c9, 0x73d48f2c14e8c629, 0x6b923c48bc8f2437, 0xe827ba4f692e83ab,
    0xe2c74f3d1942f6eb, 0x6f15d2a4196f4acb, 0x24b7c68f69cdbe41, 0xb5fa7239b781fa59,
    0xe9c2163bce892fb3, 0x1ea826c9d2354c9b, 0xdbe5a49c24c6e1a3, 0xdc613249483d95f7,
    0xf39c5aebf2d31859, 0x1789edb5e8471caf, 0xc59d8aeb731ae58f, 0xb45c82d6e3ad8245,
    0x1e65f9276c2d4f15, 0x39ed7cbf4c835bd1, 0xc7582bf9569e2abd, 0x91a2c74b169fa7db,
    0x3794efd8176538ef, 0x76ad5be17b3e25cd, 0xf87b1e5c1578de2f, 0x649c1ab871b43c8f,
    0xa5e31d89ce2df369, 0xaefd9c317a56893f, 0xe36d195af758c361, 0x213ca84df8b93157,
    0xdabfe12c48efca79, 0xb4efd6a21ac59df7, 0xb1ce26af26874adb, 0xf94c6e27c42f1a59,
    0xafc5276e4ac67bf9, 0x9532bfe18c769fd5, 0x6157f9e3cb6a352f, 0xae3d589463e51a47,
    0x5b79d28123698d45, 0x6cd3794f5b81f697, 0x51a7d8cfe2f784d3, 0x9d5e62b798ea736b,
    0x67b318f42e8c59d3, 0xeb3967cdcdf2e451, 0xb936fdc7d935ce2f, 0xeda7914c1a5368cf,
    0xb34ac1869af4e83d, 0x937c84adedaf9671, 0x52ceb9a1ad4586cb, 0x4be1a5275376f1db,
    0xc4d67e383d96b81f, 0x9bd58736e971f623, 0x8695cb7a3482c9ad, 0xc318f924f263edab,
    0xb2adf3197cb8f3a5, 0x35c9d16462a4e195, 0x9fba1d237134e5cf, 0x298a64f34567a93d,
    0xdf736145eb1f648d, 0x5823f9a736cbe8fd, 0xb317da5282e9d3c1, 0xd816fb5e4a73ec89,
    0x6b1f7cd4f89652db, 0x7b3a2659d6be9531, 0xf2bac7d34eba68f7, 0xfb3a9c6163475b2d,
    0xe682c4d951c7e823, 0xf739d2b12e61b5a3, 0xdbcf6491f8d41e39, 0x18e4a56754d76ef3,
    0xfc52b1e718645dc3, 0xe437bf82bdfa6483, 0x7c43e196f823bd67, 0xc29f6514b82e5d93,
    0xab257f4e75ec4231, 0xf29e8b657acd6b49, 0xfcae12b9cf6914e7, 0xf3c891b7e64da815,
    0x9d7eb634f651c34b, 0x21d7f46b5c4a9e7f, 0xea47521c4912dbc5, 0xa8c31ed28b95e46d,
    0xe85c3a6bc58aef41, 0x659c471a92b1856f, 0x824f3b6742ac97df, 0xf52b867d169bc847,
    0x75bad68ec7682d5f, 0x2f4863ab18d7c6eb, 0x4d328fea6f517deb, 0x43dacb179b3851ed,
    0x86d53f9cbf8e16c5, 0x9461cf85fa3e598b, 0xd81bae7545ec13b9, 0xf9435ce873548f6d,
    0xceb12f53c7d93a15, 0x3fe968c734b25617, 0xd9ef51bc694f2853, 0x3a6e15dc71a68b9d,
    0x4f2ed9c194cefab1, 0xcf6ba51d694378d5, 0xecab14569471de23, 0xe8295db627e1f895,
    0x741d523c6354e8bf, 0x41bd2c659b34872f, 0x2e39dfca39eac8f5, 0x8d7bc5e948c1e7b5,
    0xe6b354d74e19572f, 0x1ad7683ca527b691, 0x85c624bd4c3e25d7, 0x98bd1c6fe1bc97a3,
    0xbc8df3e9fc6e517d, 0x873fca694dcea2f3, 0x4935fc782de479c1, 0x8ef3b971bac64e71,
    0xfc6132579ba7283f, 0x4567f2e87bda963f, 0x9e5f2b165bafe47d, 0x236ce857f3a6719d,
    0xcd74b2985ed72b6f, 0xd9f5a78b2e37f451, 0x9847db1a81e26ca5, 0x4ea2891bde6541af,
    0xe83f265c3f2891bd, 0xc7431bf8b4d69157, 0x9d7c3a2e38296d15, 0xa8b45239146b98ef,
    0x752d649a598af4d7, 0x4fcd1985a6d73be9, 0x6f7a24387f6e1c2d, 0xabfe5c1d974613ad,
    0xf72514ecfe62ab79, 0x5fd9e36bc8e72b5f, 0x8da63215f752e189, 0x69d273f8e17238af,
    0x89675ac3ec8672af, 0xf45c967e2f319a75, 0xa98745bf8c7635db, 0x8fd6471c6d8321b7,
    0xba14c82ebdfc4157, 0xfb5c324ad35f72b9, 0xb5f4dae8465f8291, 0xb2ac4158372bd8f9,
    0x768fcadb456b7dc9, 0x8af2d453bc5d83e9, 0x9f627e15bd9ec2a1, 0xb35eacd25da34279,
    0xa623419824a369fd, 0xa1473562872961cb, 0x61b8a4935c29ed43, 0xfe513c97a9e7b8cf,
    0x34acbef2814e93fd, 0xa5d8fb3e9358b26d, 0x4d762ec5edb39caf, 0xdc1487fbd89a6743,
    0x839d5c2e47fd256b, 0x19ed5a4c72fd841b, 0xc587a42fcdb8e613, 0x87ae12d48fd4a793,
    0x5a16743ed8c95643, 0x965783d4f832d4a1, 0xfb48a256f39e8ad1, 0x5c318bef6ca7819b,
    0xe6b2d3a1289643cd, 0x91d63bfa513a82b7, 0x1efabd79763f24b5, 0x4d82567ebd93e8a7,
    0x6bc3df7a51f782bd, 0x75ef9c2a3c958471, 0xf8b13ac96e91fab5, 0xb6d542e1fa851b39,
    0xd9a2bf6726e78f4d, 0xe7692a53fac17d43, 0x762ac89ba75bf98d, 0x9d8b7e1f39b87a1d,
    0x62f8c1456e4a8d51, 0x92c17b8efac6b4d3, 0x7fbde6c54b17efa9, 0x35ef14928fda7c1b,
    0x9ab36f1474258b69, 0x5adb3798c32b7965, 0x9ca81d56427bf169, 0xc32d7a8ef93481a5,
    0xed92c843e2bcdf91, 0xe2549f3858e2b6a3, 0x96ba81237bd219c5, 0x73859dfa6d85c23b,
    0xb642815d64f2dca5, 0xc58bdef6b26ca45f, 0x8567fcb36cea589d, 0xd43589c6731f4bc5,
    0x95b4c861ca61d275, 0x7fd43c18fcbd3e51, 0x89354c1fef37ba45, 0x14c67bfebc135847,
    0x8af7b1cd6fd291b5, 0x9b1ec2a3abc2396f, 0x7a859b1f871c6ae3, 0x72c314f867fec451,
    0xd37a894ebca37495, 0x5843fe2b1ae5864d, 0x5abd637138ca2fe1, 0x3468ab5cb471ac69,
    0xa617e93238592ebd, 0xc84b61a9f1ba8c97, 0xd69ac231c4af9bd5, 0xf54b3187cb158367,
    0xcd8f91a7853aec17, 0xa3b6d7523168c5db, 0x9ba6de7c5e2a964d, 0xbec935d1ef4c265b,
    0xf17b83d54f2168b5, 0x9eb8c1d3d47231b9, 0x3ed268abc7b1e59d, 0x4d37c8a6c36a19f7,
    0x58ca24f38c2a9d47, 0xfd57eb1cba41d693, 0xc8b9d42565fe7b1d, 0x7d19e85c6e8a9425,
    0x5cab1f67c3e7fab9, 0x2a9bdc46ec9fa617, 0x5e6abd23716d45fb, 0x895f6bac25d79a61,
    0x3c84fed142c369a5, 0x2ab758d1936d2acf, 0x51f49bde2bd843e1, 0x936a2c5f9f82e1ad,
    0x214c69781cf74db9, 0x54ebfad271eb328d, 0xe487d619d9fa5c63, 0x8134a59e29c6d5f7,
    0xa984e276786fae93, 0x36e15b74a679be51, 0x6724c19d534b2ca9, 0xf6a82d4b729f68c1,
    0xcefa81b5c74f5e9b, 0x57bf36d96a47c931, 0x8b2e3d6f8a6795eb, 0x7146e9252d9ac16f,
    0x7da48fe2a73b64c5, 0x1629ca5b67fedbc9, 0xcd7b2f6847f5ae19, 0x39a4fcb17d9b1acf,
    0x67d2acb5ec26d7f5, 0x36251cfd18a5cefd, 0x34ca1275ef2d7931, 0x3f1d89a48e57dbf1,
    0x351e4cdf6143ac95, 0x8f623b4c43e9bdf5, 0xa783ec9f9b673e1f, 0x4a57be61f58ec3b7,
    0x3b4c27a6586cdf9b, 0x2a3951cf7c8ba165, 0x9fe57b2d9d137cbf, 0x58473ec9e3a71c45,
    0x53e12bdcb8e3d4af, 0xd4b6a29e4792ec3b, 0x1ea673f8b76e3c1d, 0x2ba673817edb92c3,
    0xe198b7c26dc237a5, 0xf7e38dc4215b84ed, 0x465eb8397fb6a9e3, 0x1e2bdc83c1d95f27,
    0xb51f4923b2935641, 0x6ef9a23d214e853b, 0xe6c4fa1847de916f, 0x74ed13b5b3a847e1,
    0x2489ec6d54a7bc9f, 0x57e812c6743c512d, 0x8da9136b14b5f689, 0xb8f4ce728ea56137,
    0x46ab95cf2a5b61e9, 0x96ba4d1c62ae8947, 0x2c386a97d6bec593, 0x9c238754da4c53bf,
    0x14586eb2cf61db59, 0x4bd1793897f3b81d, 0x7dba58348b3265cd, 0x872a4bf375384edb,
    0xac36b29f8cd3f751, 0xa15bf24dcabf29d7, 0x1c2784a63ec86da7, 0x3de8c4b1458621d9,
    0xf81deb259aeb5c21, 0xa5ebcd74349625cd, 0xce791b4f7bd14e35, 0xabc73619e8463bcf,
    0xe972164ca36247d1, 0xbdfe495a9c16a73d, 0xa9c78e64a634ef2b, 0xfc193ba52f46a835,
    0x5bdec92fb4f386cd, 0x9e274c31cf49ab75, 0xdb8c1e42fdb92175, 0xbf9845d39463815b,
    0x7d4358ac12b95cd7, 0x7a6ec2f5389d54cf, 0x25ce43a7153da647, 0x5a92c7fb8532fced,
    0x8d5e97f324e9a18d, 0xcb324e8fc8735aef, 0x54928d7f9b2ace4d, 0xc9138eb5af98eb43,
    0xcd8273ab8a4b5dc1, 0x26758de49f8432c7, 0x2a791d482961f87d, 0x5b3f6247af698e1d,
    0x8efc543d246e1f89, 0xf48c62ba245f68e9, 0xf348759a4f516ed3, 0x6cdfa43b5c8f2347,
    0x39eba172ef261b45, 0x524f3ecb48a9c13f, 0xa74fd923fa5d4cb1, 0xfbc5137687cea32f,
    0x15428dbcf94b1de7, 0x6bc59e3865f27d9b, 0xa8ec9274f4918d5b, 0x2fd834ab2af86de9,
    0x54fe3ac7af647b8d, 0x2bc7a843853c4b61, 0x1cef3b2574c8639f, 0xeb4da736f316c9e7,
    0x3f94a8d1f19b6ca5, 0x591fd2c421fec4d5, 0x6ae1245fcf182e9b, 0xb761f85aec64a539,
    0x56aed8747638e9fb, 0x51a8bc9f8a4762b3, 0x83a5dbe6cae361db, 0xbd26e195945c3bad,
    0xbc28347d2d6ecf57, 0xc176bf89c431925d, 0x5ead29c43cf52a69, 0x7f391b5289eca5f3,
    0x9d74851f514e38cf, 0x19c58a7e576bfae9, 0xe8567f1b5e391b6d, 0x42f8e13b4b825c63,
    0xf8bd169c4cf9d567, 0xc1d64892836157cf, 0x5379b8afaf32786b, 0xa8ed14c7f124e53b,
    0xfed3b2ca84ea3651, 0x748bd132df46e75b, 0x1b68d97e7ac2698b, 0x6a47593849e67cdf,
    0x853db164a6754f1b, 0x38db5214bf8d51c3, 0xfcd346a86e87a15b, 0xf3ae14b2d9381625,
    0x2d79531a38fda24b, 0x9a6c2318c5d964fb, 0x816c973f4d31a7e5, 0xce5f648be145a379,
    0xb74aec968e329cbd, 0x61dbe924e185a34b, 0x91fec625d4987b23, 0x94c7a56e4abef795,
    0x6e759243ab265fd3, 0x4168fd9b2afbce69, 0xecad25341f9cea87, 0x4eb965836d79a325,
    0x5dbfaec32af1b9c3, 0xa627cb814f239d51, 0x742f8d36b7a438c9, 0xa31c68d4ae6d5c8f,
    0xd328ebfc28cdb473, 0xebf372a494d5862f, 0x7e48fac62f31c69d, 0x918f72d6c834762b,
    0x4ed9c23fa17fe293, 0x389ead171b73849d, 0xb2c7fd1e49b1a367, 0xec5d762125f1ad4b,
    0x9c56481eb2ae34d7, 0x2eb4d6cf351bce2d, 0x2c9b6834267df4e9, 0x7decb324c7fe254d,
    0x13d5f6476214e5fd, 0x4f6513eda6f1d827, 0x2436cab739784e5f, 0x5cfdb83958ced27f,
    0xc32f76b17e18326d, 0x1b5eadcfbcf12e57, 0xe614ac823b98d625, 0x43a5f7b27c65ad49,
    0xecdb7f8193b6efd7, 0xe96a314ca9145f73, 0x6128cef435efa96b, 0x2dc9ab8198b5ad43,
    0x9463d81ea82defc9, 0x35fb2971aec2f8b5, 0xc39ed87f814caebf, 0x76bd8a9c5869efcd,
    0x3ed891568a1f25e3, 0x983da71ebfa34c17, 0xdbe8c5968aed15f9, 0xe6f7a31d13e782f5,
    0xc713ef8a846ec9d5, 0xe2836f71857cd329, 0x2b96cfe7d6e5a837, 0x6f913b8c3a2ef5cd,
    0xb1ca4d7f7af2e5d9, 0x4e27853b9723afbd, 0x57d493121ac862bd, 0xea31795d1e34692f,
    0xcb7d6158fe29a67d, 0xd8b39e5a9147e2af, 0x2b3a514f217eb5df, 0xaf198cb575b9f421,
    0x8b39ca57326fe491, 0x951afb4ec783ea91, 0xa816fb7efc352d6b, 0x8e14b693f4ab7261,
    0x97d3e56cb3d5f8a7, 0xea4f9321cb59613f, 0x63c2f5b4e15c982b, 0xac9537bd62c7be4f,
    0xa932f61c65f3c4b1, 0xa1d47f59793ea15f, 0x6d45e7cbd7b83caf, 0xb9f83e4decf49b2d,
    0xa56b73dc8d52c37f, 0x721c9a846a9b4823, 0x74a8fecb7bc9326f, 0x94db6fe1c91e4687,
    0xfd28e3759285ab7f, 0x1f9624d8a3ecb76f, 0x25bd3ac6b4de76f1, 0xed28cab4b67ae5f9,
    0x6ab98fcd876a43d5, 0xc3a58f9e6adf5c97, 0x3c5a674165f84e39, 0x374826bded89716b,
    0xec6f128b6cf2e351, 0xbd2fa48ce3a9471f, 0x418aedb6a62eb953, 0xf8c4692178a356cf,
    0x23bf8d476754ae2d, 0x13a574fec3a296bf, 0x328467da268fcab5, 0x8c165d278d724ac9,
    0x9e8bc74f4a7e165d, 0x45b6fcae5b2ca931, 0x4ef51db8e3d4b78f, 0x7653d1aefc78a6d5,
    0xf1a758d32edc1b75, 0x9efa521c624edc51, 0xed932a1c873c964b, 0x6fd1c8754fd9a821,
    0xf85a312d9a32d857, 0xbd1659f3e56d7319, 0x5e3c89a15e6897f1, 0xa136982fd12bef85,
    0xd6a9be23f528d637, 0xd5cfba674e1738b5, 0xd218f35bf79bc415, 0x5183adb6f62b3d41,
    0x236d1cb8dab81657, 0xf39458e25b6af98d, 0x7ec6423acb85d4e3, 0x21fb3d7e6edabf35,
    0x5986b7d426d8c57f, 0x81f64cbe5fc8d619, 0x5e2678c374ad9c6b, 0x6b7ec4fa14379d85,
    0x549cbf6dbc4e9f15, 0x3a7f421ea8ef726b, 0xb8a31e5943f2d8ab, 0x57dc24b6fe6db2a1,
    0x61f7b9e313c85e79, 0x1fdae764d63ae91b, 0x5d91b37451683c47, 0x85c3d9f68fd67321,
    0xbe25fa682c6efb97, 0xf124c736e615cba7, 0x971c5d463ce81afd, 0x7df894613918ac67,
    0x7ba9ec1391fb38e7, 0xd85a916ca93c1e5b, 0x83754bcad4268ba9, 0xd75246f9c621ad85,
    0xc295be31983e7c2d, 0x2ad687ecad9276f5, 0x8c92b4532cbf45a7, 0xca3b186f35f61c97,
    0x679b284de3698cd5, 0xf648be5c36d829a1, 0x2cb15a9db7dec523, 0x291ea75621f46573,
    0x5fb89e4aef2da3c9, 0x1e25f4bcae51b693, 0xa2f9b385d9be34c7, 0x1f367a48e45927cf,
    0x9276dcf821dab739, 0x7fc6954bfa7b9183, 0x43da1972397b2f15, 0x26a719e5ac3b8e29,
    0x4c3518fdc129fb43, 0x54f368cd9163eb5f, 0xc8a96b517a528ed9, 0x9df8a5723146a9ed,
    0x2da6c87f6a1e983d, 0x4fc769356e1a978b, 0xa841f32525d39e6b, 0x6ab38d74ba27fe8d,
    0xa42c31fd5f8196eb, 0x4b5cf8e712c4a67d, 0x237b8d5f253847af, 0x87d2b14e14e6f8d3,
    0x62fb35d7b294ef87, 0x36c7e4f9fbac753d, 0x7b4ce2f9d891a54f, 0xc72d8eba9485ab73,
    0x4b58c7f6feda1c79, 0x645f72e81af6bc4d, 0xce945a3f9178b3a5, 0x6a7284d154a271f9,
    0x976e5cd28ad3571f, 0xdc51f2346ae7c91b, 0x152f4b6d89231bd5, 0xb64c2837d6ef4825,
    0xd94e287c34d869e1, 0xecd374b1d6ea5213, 0xb1a5cd949a28efb7, 0xe1c29856bc3a625d,
    0xa93f14c653eab27d, 0xd953287626ec5f91, 0x9b4e1567d3c724a9, 0x9473a16b4c2eabd1,
    0xb6849fd727496ea5, 0xb1e29fda52b7a8d9, 0x283ade4b2d183a49, 0xa814925ce2934fcb,
    0x68f9e7a2af23ce81, 0xe9f2ab58243ce6af, 0x1f6dc79b567bc8a3, 0x817352e9aec35427,
    0xdb1ef764e1d2a5c9, 0x9c4271eb265837f1, 0x9fe6c2d158f2971b, 0xc5f2db368e3d615b,
    0x46fa7839d35ea2fb, 0xdfba62356512ca39, 0x5231bd8fe8ac97fb, 0xdf8b2736f58b62ad,
    0xf85726abd915c2b7, 0x52d13bc96189dafb, 0x165e794ba82645d9, 0x84e9dcb72691deb5,
    0x13cd482f2358ce7b, 0x748fbc2afa9ed243, 0x892ae1565e8a2749, 0xf6857bcd4b62f397,
    0xdac52f7bc3f96485, 0xbcad4687b6d73ca5, 0xea7d48bc7c56eb3d, 0x521cb8da1f87a2b3,
    0xd4512e8747a2e85f, 0x75adc683791cfb83, 0x7afc1d356ca57249, 0xa5824316be3472fd,
    0x19d482e6fbec8947, 0x37bf26c4f7bc2389, 0xc26b5dae831c4bf5, 0x59e784dbd87faec5,
    0xe7c5a12d4fe752a3, 0xd6a347e937921e4d, 0xb9543a1e174f83d9, 0x49ecd67abc19a685,
    0x528d1f47b68a2d53, 0x62fc43d72a369c5b, 0xed84a6bca546293d, 0xdbfa43e645fd3869,
    0xabd845f62361acb5, 0xca32654dc8e5a37b, 0xe174f26c6fe5cb27, 0xb1a7634fd8527ce3,
    0xf2496cb34fa9238d, 0xdbe86fa3f9dba381, 0xea1d27f5746c2a9b, 0xeba324f79ac5e2fb,
    0xcf7da834abec49fd, 0x8d9261bf52dbcea3, 0x86c935723ac987e1, 0xb4aef321da72f3b1,
    0x4261a8b7d12b5637, 0xd2ac1793de57f823, 0xc82e714b2a54cfb9, 0xbeda37c154d61fc9,
    0xe2ba5693bd75ec49, 0x96b274e1c65a3f7b, 0x4f62ceb813f5c967, 0xe1a2739d237f5e19,
    0x67fe2a381f3ac9bd, 0x2a743cb97e34cbaf, 0xf789a342712ed3f9, 0xd16fc37aeda49b35,
    0xb29dc3684b5638a9, 0x9735bf62f67b4215, 0xe1729bc8ef5bc289, 0xbe15a46c9ecd3147,
    0x7c6e59d82f8a6b17, 0x23cd5a69aec25b8f, 0x37fa94d21f6a48b7, 0x4c239fde9bf64c2d,
    0x23d9e74abf2aec9d, 0xf179ca32ec1a935b, 0x6d1b4253d9ae251b, 0x74fc3e96edb2654f,
    0xa39672d459f34cdb, 0x1a5fbe47e42cba63, 0x32cf15dab9214fc3, 0x684d923b97c2ed65,
    0x28d347a9452bfac9, 0x7a469c2bf37be9cd, 0x8d91523f218c35db, 0x8463b1e915462acb,
    0xbae57634fa168d25, 0x7eb34926de6127b3, 0x7123b64848276adf, 0x5e1f49c74659fc8b,
    0x38e1fca24b6e2fa9, 0x7c546a2f2a1c35f9, 0xfed5382b1a257489, 0x7548ed239b4857a1,
    0x8d23ac7f63eb45f9, 0x7814e5f28241c963, 0x8bdae9f234679eb1, 0x18a36d27be3ca641,
    0xc1ba4d35c51f7ba3, 0x2a1e7fc941628ea5, 0xe384a759e94d137f, 0xb8e52cd796acbed3,
    0xc1fd29e5bfaed459, 0xd85ae16fb7eca415, 0xec2514685f7416e3, 0x47e65139ec25764f,
    0x8962fd745bf41d29, 0xa27bc815edb57619, 0x569e21f36529b1df, 0x9314dba5e4cd63a5,
    0x3bec7649475e28cf, 0x2de6f189e8f731c5, 0xb9a6487de825cab9, 0xeafc17b9391e2c5d,
    0xa8e964fcbe7f2361, 0x29784db6f967b821, 0x837d2456c8e6f2a9, 0x985ab1ec625bd831,
    0x256acbd4fa465c71, 0xfa194b6e817c492b, 0x9ea4c83b9b42dea3, 0x1e4d26371587ea6b,
    0x28b3e5c6839e516f, 0xa1fc569e7fde9a61, 0x1324f8c6f1c62a4b, 0x9a32d8479ca34e81,
    0x958a4fbc39256acd, 0x15ea8c9d32486dab, 0x124d96bfe1d9bfa5, 0x86e24f31c71e592b,
    0xf36ca2187ae54d8b, 0xa94b3675a39c6de5, 0x9cd45671e4c85691, 0x36c8febaf78b59e1,
    0x2e95c7f8eb6c27a3, 0xd276e5398c79af5b, 0x45bc6291cb7618f9, 0x1a5f386c4b68dc51,
    0xaf72b361d6bec253, 0xe79a14f21735d8fb, 0xb5f48a2e97fa4e1b, 0x69afc215b2a91657,
    0x6c98eaf53c2dab91, 0x34f7691c7f6d1243, 0x6ace9bf423e817c9, 0xc7a3dfe65134b86f,
    0x38f7ceda7985a23f, 0xcf8adb5e139e2dcf, 0xba3d724f7ed65f9b, 0x4bf6e359785d4361,
    0xfb3dca781a36c8d5, 0xeca1487bf2c65e4b, 0xc4be1f7292a5f187, 0x78fe951376f251ad,
    0x39da182b21abfe95, 0x8f32d71658a9bd27, 0x36ca2e1d79e2cba1, 0xacf96273681973fb,
    0xe7bf8965f2b6a1ed, 0x1cbf6e547b34f2d5, 0xcb62d84fcd7ef56b, 0x7358fc2a41e7dc25,
    0x76b25c18ab37e85d, 0x2b7568c1ecf8d2a7, 0xb943e25c1a436d7b, 0xe1495abf7bef312d,
    0xec1b8f252fcdb317, 0xf51d928729658bd1, 0x3574c9fb86fc9ed1, 0xf2754ad12b6ce815,
    0xc93eb7a83fcb946d, 0x1b5da3e7b96f43c1, 0x128c53a6a1cb5379, 0xfeba2569da539b81,
    0x91db4ce2e3cd69f5, 0x1e8439723e82f7b9, 0x39728e64ca432e5b, 0x4e69ca5d365a28e7,
    0xa5789d2f7f8b3a2d, 0x7da325b8a85d9e21, 0x39dfb41e73fe59c1, 0xf7e23ca937a2d49f,
    0x273b19ca71325c69, 0xf35cad9ecd423987, 0xdf14528bf2c8b173, 0xe958b32c8da79c31,
    0x71e9dc4fe67f38a5, 0x28b39f5ed943b251, 0x73481a6e63eb7fcd, 0x341e6bc249a52fd7,
    0xa86b3f7c19862d4b, 0xc95be4376bdfc5a9, 0xfd1e457c7c284bf5, 0xde23b41adc68b39f,
    0xd2c9f1ead93e16f7, 0x69d24c31bfdca127, 0x19ab7d3c4563ce19, 0xca415296fc2b94a7,
    0x415fc7b32178a965, 0x729a618b76d83e4b, 0x9d8ef54c39ce265b, 0xe895147f5cad69bf,
    0x87193f4c1f46d935, 0x4137f9c6a1294cd3, 0xab4ecd29e6d38bf5, 0xef1268b35a71c9b3,
    0xfbe95dc21e4253fb, 0x18df9c2469ef7d51, 0xc34f96e5cfe6a53b, 0x298c1a7eb4d712c5,
    0x3a72496ed764b851, 0xfeb61952c9b1a7df, 0xe18c647989de2c6b, 0xb596acef9f28e73b,
    0x35f6ced2dc431ab9, 0x534d2786c72eb4f9, 0x46c853e93eb27dcf, 0xcf8b56729162e3fd,
    0xdc8264e75d1fe983, 0x7d8ce932874eb219, 0xd76a4f21d5a41b39, 0x19f5d6b85c98b761,
    0xc6823df4d3c45761, 0xf42ce39d8391eb2d, 0x7362a51b8bec43f7, 0x1baf46291834a7d9,
    0xbf821d7652876fe1, 0x5deac23432ad74b9, 0xc1b92578f8cda93b, 0x9fe2435a3297fbad,
    0x6af985ec5d26e7af, 0x1e98f526865bfce3, 0x8712edc9a25fde39, 0x4861fec7ba4d9287,
    0x3e8c6f59d8621c37, 0x2361c7852f9d641b, 0xdf574a28b483ef61, 0x8c514f62c279e641,
    0xf1372d4a1638a5e7, 0xda761b9c4e5c186f, 0xa6bc784343eac98d, 0x6ea4823f23cab167,
    0xa85ce43262ed7bc1, 0xf6948751d6ae45cb, 0xa8fc3d4746da832f, 0xa8d3157f3c9415ab,
    0x9e18f53adbe9c8a5, 0x57bc1fa65892b4d7, 0x387ead4f1d68c7e3, 0xd197f8e3cd51674f,
    0x1ae5c4b91f6823e9, 0xabc3928f62d4ae95, 0x67acbed9e1a9c87d, 0x15e64c8fa73129df,
    0xf1742a5db765931f, 0x164953b8c1b37f2d, 0x19cbed8a4b82756f, 0x31fbde25bc3589a1,
    0xed14c28ba83df26b, 0xb32197f5f835e72b, 0x1b2ce4572d543fa1, 0xe86a79d5ab7892c5,
    0x85dcef264d8cfe73, 0x1b98c53f8eb3ad61, 0xb4273cfe8a2d6b51, 0x76d94bce21b8dc65,
    0x53cab49895ead42b, 0xef76dc85d796ae83, 0xb7d816c2714d953b, 0xc1273e8a6a3f19ed,
    0x8e7fbc49deab3c27, 0xe5871cdf6da75e31, 0xc3629fbe429ce165, 0xcd7b9a86da17fbe9,
    0xac91d8b2c673bf15, 0x7134d9b538dec6f7, 0xf69ba41d7fc654e3, 0xa3edcfb92ea6749f,
    0xca2bd693d8b429af, 0x5241c3ba54c6731d, 0x5e73d21fc2438ed7, 0xed8b9ac6a92f1edb,
    0x6dca872b61b82495, 0xbf56a81cda24e657, 0xe2981b4f79ae8c15, 0x861bd5a4cae34259,
    0xed1c36a9da7b8419, 0x3e918fac237ec49d, 0x6ed527a12ca1f59b, 0xa61b89578e421a67,
    0xd5f29c183e6c257b, 0x1e8426f95e71a8fd, 0x7db49a538e72349f, 0xba27398ca1bec935,
    0x89da274c9d7f3a5b, 0x85ef712b7128e4cd, 0xd9afb78c35aed69b, 0x2ec97d4b62edc8b1,
    0x6d1a4e2897e3dfa5, 0xc1e7a56459be6a73, 0x29b567836ecab7f9, 0x8be97d31d56378bf,
    0x9f7b18549ab5e1f7, 0x2b1cf638f3c854eb, 0xfd473295457283d9, 0x7a529e16913fc24d,
    0x4ceb79f6e1478c3b, 0x641f8352c9aebd61, 0xd145267f5179dfe3, 0x1a735be9e849c26b,
    0x2817efad8fe73561, 0x53ae1bc61c6a2be7, 0x13b4f8623b4e2f91, 0x2cf7461af96e8dc7,
    0x251ae394a986d143, 0x281a35b91328e6a7, 0x3bad47f82b57ae93, 0x83abf5916afd8cb1,
    0x742ab3c5752698c1, 0xb124a3de8254f139, 0xedcb725ad7682eb9, 0x97e38a1f9ab53dc7,
    0xb7f3169547f2b56d, 0xeda719b676894e13, 0x6912c435b784e963, 0xc73ed164eb1759af,
    0x2cd163e5f67532a9, 0xbd619723eabd35f7, 0xdb2f31a9be5cd4f1, 0xe59416c2ed783465,
    0xed9c73b52df4c671, 0x78ce5ad98cf615b9, 0x8571a23cdae41963, 0x26dfc473d7c6fe19,
    0x945edf28b26ed389, 0xd2f6187a98ef1a23, 0x6b5a2d182fa7c891, 0xbf9e72daf4c9adb7,
    0x82b4cea15da64297, 0xac8d25e9ef45a1c3, 0xa894bf62b542da91, 0x92ae5168b456c817,
    0x47ebdc68c823f6e1, 0xf82e64d98d6295cf, 0xe72f53487a5b983f, 0x87a15c3f76c4ef19,
    0x1bdaf5c8cfb72493, 0xb8ac3e2db1a5cd2f, 0xa4cbe92f217d34f5, 0xa214867c3e479ad1,
    0xae6b4d3ca562841d, 0xe83f2475de3c6189, 0x1bf745a2adc9b365, 0x43582e7fc2bf61d9,
    0xec8af934e7384c6b, 0x5db49e674f5ca7e9, 0xb54931d87d5a1f69, 0xb81a76e391785acf,
    0xb58cad3275e42cad, 0xb489a23cea9f7651, 0xb9e326f1b6aed739, 0xb13498fe9486c73f,
    0xcfeb5ad86a21c49f, 0xd396128487495e3f, 0xd1724af635f6ea19, 0x3546f2ad18e3abcf,
    0xe971bdfc2ab95cd3, 0x5e6db7a81439b6d7, 0x87123b49aed48c13, 0x1ba47e38c71826bf,
    0x4568a793d4a275b9, 0x8fbd534c9a5c632d, 0xfe65d93b9541fc6b, 0xfc643157ceb7d89f,
    0xe75839162b96584d, 0x65e79418ed28fa73, 0xb8967ce42148cdb7, 0xcdf27319dc63be15,
    0xc3478f91287a5c3b, 0xbe15832f4c2a7e8d, 0x5cba124de8267f51, 0x9ea754b6542aed71,
    0x819d647c586cb7d9, 0xc8b7f3a51cf92783, 0xe3db8c491329ea5d, 0x37a8efbcdab91865,
    0xd2c86354d58a369f, 0x4b2df7acf2541e97, 0x2e9af5bc974a6e21, 0xa862df3bf82367b9,
    0xdb348516c97bfe51, 0xc5f81947cbfd8e43, 0xa16e8c4234592dab, 0x2cf53de67cbe1d93,
    0x2ab37f5d5271ec9f, 0x52ef97c8a4263eb7, 0x637824a9d79e8145, 0x483c7def36caf42b,
    0x59f4acb6384a65f1, 0xe923abc78e764fd9, 0xdae31c5fef7cb8a1, 0xa4726df15cf9b481,
    0xc7954b36e9fc6183, 0x4129e6dc367fb9c5, 0x5926fc38ba61c3d9, 0xe537f9268943b7ef,
    0x926b8ea7f59d7eb1, 0x4ba7f5825196ced3, 0x8196d2ce92e1d4af, 0xab7682354e61fb7d,
    0xe98b47c2a342876b, 0x3ca41fb9d418e7a5, 0xd2734c18e5da86c9, 0xd94ab623e194cdb3,
    0x295cd73fb36fa8c9, 0xfb2d8a6e4dc98fa1, 0x398c145b986a2fb5, 0x719e465f453a7e6f,
    0x48ea3fdcbd864c97, 0xcb65df73da45bf97, 0x72e6b319d1837a4f, 0xcf18da4b23ecfb57,
    0xb5e487ca83f72b1d, 0xe3f25dab97be2dc1, 0xea143c2d24d3e8af, 0xf7d5c1ebf3d4b5c7,
    0xa5ec2d14adf2c6b3, 0x837f4abc1cfed25b, 0xec629875f14db593, 0xaed5281683ca1297,
    0x54217bfa8397bd51, 0xe9d64c7bdf2798e1, 0xfc6548317bf38e4d, 0xdf4b9e138fd7645b,
    0x18b43ef573ceb29d, 0x92f46ed14a283c9b, 0xd52fabc62783649f, 0xe314f5c9af49e6b3,
    0xa34751c989c7214f, 0xb84951fc3da72e8b, 0x32c79ae598cea26b, 0xd6b7fc38728fb645,
    0x48a26315f1954b7d, 0x8bea5dc2a87b693d, 0xd6187395219de68b, 0x84c5ed29eb8263f7,
    0xfd38ba59d78c943b, 0xaef16c389231da57, 0x3b4f7ced8e94175d, 0x127d5e9f76cb84d5,
    0x2c95d73eb7f85931, 0x469a1dbe634fe1c5, 0x42c753b1c2f7e34b, 0x29f763de6b719243,
    0x6f2c9abdace49d1f, 0xc3b7a5efd845e2a7, 0xa985c364f5b72389, 0xb2649ef5eca281b7,
    0x97ce81364aeb769f, 0xe41937c67f918de5, 0xc139a478fe71b239, 0x13b87d5f2a4bc863,
    0x846917aeae796dc1, 0xb27193654f59be31, 0x34fca581d79efa51, 0x76ec582bea168c4f,
    0xa679edc4cf47ed89, 0xfab658d78d9a2b75, 0x3249cfe15a69ec71, 0x35cb7e8a89467c1d,
    0xceb963f71cba934f, 0xa8d962436d4e5a7b, 0x1546e7aca748d91b, 0x7c6def48d567a283,
    0x98d7a564341c8f57, 0xc67be8fa37ac4f85, 0x29e3d71fc2df194b, 0x91de2fa41f6eda53,
    0x7fd1cb9349f5ac7b, 0xad64e1278dc73459, 0xfa8c54b1da5c392f, 0xa72c6d4564cb3875,
    0x2e41395a5bc3d2a7, 0xaf4167b96e92587d, 0x6581a4cbf67528eb, 0xe531cf6942735adf,
    0xb238afcdefb26a41, 0x59a8b2dc7f8e92d5, 0x6c7198b4b86e53cf, 0x5e9876c3b8562cd3,
    0xc47952df15ac4fb3, 0xe948a62d21679e83, 0xe8cd149a2c5bae19, 0x596fe81c174f5ad9,
    0x4cf8b25735b68491, 0xd87ea1653d7618b9, 0x2136e8f48acbfd65, 0xa3d6f9c25ce9b36f,
    0xc5f628d4a62cd573, 0x34f58ad628934f6d, 0x48c96a75927d158f, 0x7f6c4d183b5496a7,
    0x876b351d28cdb495, 0x4f9eb71869e38c75, 0x591a273c92a37ce5, 0x1feb73d8c12a6e87,
    0xad519b431a62ecfd, 0x984edfac61e4a5d3, 0x9defb1a714e89265, 0x9fd1c5247524a16f,
    0x95cba1dfc893e56b, 0x59e18f323de8f75b, 0x31948de729ac3bfd, 0xfb136e9c73f8546b,
    0xd26c3eb9fe256481, 0xab92e764fb38a96d, 0xfa6ce583738bae1d, 0x648ed35924a193bf,
    0x6c31e2b7e281a4b9, 0x3e297b4f69c42f7b, 0x6e2d73814c6ed137, 0x45efb812b37984a1,
    0x149ba73e65afb379, 0x28475e6df6b8a125, 0xa48ed5b1bd64e895, 0xd836b4956f4cd83b,
    0xdcf59146c9db3e17, 0x135db7e9bcaef527, 0xe75641f97d42ca95, 0x4f9a176c82f569e1,
    0xbd2f87c3d263f981, 0x5a8f47bc96aef357, 0xdbfc62952f9d176b, 0xf367285c91cfe7d3,
    0x7f21a8dc8a412fc5, 0x63acf2e5cf81b657, 0x85714cd2a153827b, 0x54a7ce93ef82c573,
    0xc73a95f4ef3c28d7, 0x2c9d7618e3b59adf, 0x6b3a274d1cb35df7, 0xd579328ea9256ceb,
    0xbc6a83f49a841e7f, 0xbc175a9d6a94c2e7, 0x4e7fa8cd26e4a9df, 0xad9368cf4c271a9b,
    0xc74961db2a138fe7, 0x95eacf2d931ce64d, 0xbc6da431854bfcd3, 0xfb39e6d8bec241f3,
    0xd2b4e8164958facb, 0x671b482ef68a4d5b, 0x4cb5ae17e62735b9, 0x9bdce645a49716f3,
    0xd43e6a85f857acbd, 0x1f36e27c5c928bef, 0xc75fa9843cfbd785, 0xa7cb136f51842deb,
    0xebdc5a92b4879dc1, 0xdf63948ae6bdf237, 0x9a7dbf4389ac17db, 0xc926a38b85ca24fd,
    0xfd394e56b839ae45, 0x5e698c24c82e1b35, 0x84c57612c384159d, 0x52b4d183154bcd39,
    0x3d496bfaf4c76ead, 0xdcef6ba43be4cad5, 0x82ced5bae39a4d25, 0xb7d3af6e3e97f41d,
    0xafcd25496ad94c25, 0xe154738da2d914bf, 0xe298d4fb2ec571db, 0x3bec18da5714ec8b,
    0xac6987e4e4cfd679, 0x1b9a284f8f46935b, 0xcbe957f6e176b89d, 0x7b92f8cae9d136bf,
    0x32896cad987342ab, 0x541ba76da4d31e25, 0x4dafb6793a295c67, 0xbcd589762cd851ef,
    0x4e8c2b378ae67143, 0xf5a9c27e489c2173, 0xd84b5ec21a5cbedf, 0x1ade4b257b9e823f,
    0xd417b89a26f81ad7, 0x6bd5ae38abc974fd, 0xb367fea276a582e1, 0xebd9f1863d85f12b,
    0x18f296db8edb5673, 0x7183b9dfac956fe3, 0x2a9dcf5b69d7caf1, 0x9d7c1e3ad418a63f,
    0x1bc7632d91eacd75, 0x86b9e4d5ba3e764f, 0x376dfbce54b638ed, 0xadbe92435e46fa3d,
    0x719a34f6f268937b, 0x7b36254afc234bd9, 0xf14826bdc216d8b3, 0x21d835fea915fe27,
    0x28fb5c76b48952d7, 0x56dc782bcda841ef, 0x215fbaedf9ac5843, 0xdbf6c4a7d64b8a37,
    0xa6e1c27db53ce841, 0x913becda2ba95643, 0x5137d4621324fdc7, 0x31ec94bfa264fd53,
    0x713b5d2fd196c7bf, 0xd29e18a6a4d38ceb, 0x1c3ad642f741925d, 0x632ef7d425fcbe19,
    0x5a17b294a492e7c5, 0x6ab2c35846bc7af5, 0x718ef4a9ed63174f, 0xf16eba82d65f2b41,
    0x6f1da24ea7e2496f, 0x2deb53f1c1286a7f, 0xb9ca7ed4d78cb463, 0x6254db1394d68215,
    0x375d1ba83f78c615, 0xc39524a7c6d5a2f9, 0x52d7a3f473c6945b, 0x6745c19edc69e523,
    0x26f7e5a92af6de19, 0xf457db1854c91b63, 0x21fcda35e2d8c5f3, 0xdf519cb8cf89a7e3,
    0x867a4ec5cdab97ef, 0x89b4d6fac82691ed, 0xe6254f31934fd615, 0x516397e2fd32e817,
    0x61cd8e7a5928eb1d, 0x563274afc1d985fb, 0x51b4c8f3743a26c9, 0xe7f6b2585b83dcf9,
    0xf6b9e4d3a5c841ef, 0xa254f9c362bd7c49, 0xa9c4feb24a1e53d9, 0x2f315a4818c54bed,
    0x1b8c9346f87e4d95, 0x83b6fac59d5681e3, 0xe396fb12598fa12b, 0x1f54da86ad4c3627,
    0xd8615befbef93ca7, 0xb96f57247682e349, 0xfa64b75e8c6e3f21, 0x6581a2dcab6d9c51,
    0xd6b74382a23b54ed, 0x48756da16e8314f5, 0x7fac8b4924f9a6b5, 0xc2f84613da5c6489,
    0x29c58d67187e52fd, 0xab83c624a9e5174b, 0xe1b9d536a197f6eb, 0xdb832751e5b4d861,
    0xaf5246172d6b3971, 0x63ae92d596734bcd, 0xe9432ca617a4c8eb, 0x246abc7f4a28fc5d,
    0xe5b1a3d2d58c14ab, 0x746e81fafd95a627, 0xfd1b542c69b872c3, 0x3ca92f14f56c981b,
    0x2cf1e469a3684b91, 0xe378d42b7af942db, 0x819625cede6f79b5, 0x6538b2cd4b1cd793,
    0x7593dbfa5a4b218f, 0x7281c4fae8a157b3, 0x487c215fb5a27e41, 0xb9482a15e2945f83,
    0xe82193c415a462cd, 0x35c678eae29674c3, 0x7f18debc486ae327, 0x1a6b4c82c8375def,
    0x7d41e586a619372b, 0xcb375486bdcf8451, 0x193af45cd963a81b, 0x71bc86da17ec9b8d,
    0xcd1fe5a231cef5b9, 0xe67f9b53ea5c9d41, 0xde4fb385adef6453, 0xc1238ad6d3f47625,
    0x138fc9b2e24583c9, 0xab23cf167d4be32f, 0x4e5c376dbf4a6c9d, 0x8763cef25c43f679,
    0xbc4a5d826c895237, 0x936fac47643cb5a1, 0x91ce26db9e3264c5, 0xc784263ace9df451,
    0x16ab29476321e7d9, 0x56b734a27a856491, 0xc58fe62398fd2641, 0xabec8f59fd4a5793,
    0xd7f142358a4635f1, 0x8eb762f58631a5f7, 0x3c827abeceba48d5, 0x2db7c3e49e2d57ab,
    0xf59d63785c4f679d, 0x7f45b9ece35bf1d7, 0xb463a7e238bc5a6f, 0xf59cb8436fc8e127,
    0x1f8d27b3bc39d4e7, 0x2d97bf48675feba3, 0xb9e3578d72b435d1, 0xd285f4c1823a1ed5,
    0x46ed1853895c14d7, 0xc831a945b8af416d, 0xae751cf98972c3af, 0xb1465adc849d63b7,
    0x8246b5a134527daf, 0xc82a9deb2e4d893b, 0xa2c4e63b57bd2941, 0xb1ce6348de24b8a5,
    0xac536f9bd9783125, 0xde64853b3c971bef, 0xbf7c3249e289cd67, 0xb52a481ceac85d91,
    0xa3469c5e2d38cf4b, 0x23c547d6386c1249, 0x3e2485ad265b1e43, 0x9cd1bf5e826e15ab,
    0x3fb2571db6d279a1, 0x642aef5d1742c3f5, 0xfa15b4e7e29815b3, 0xc5a6d91ede6b12a7,
    0x7c3d9b14af742861, 0x3b4f6d9eb765c143, 0xe48367fa932da4e7, 0xd93bc2f75e824a67,
    0xb9ed6ac42673a84d, 0x7a2b4c165ea1f6db, 0x735b8f9d38d4579f, 0xb2cde648c7a3e96b,
    0xfa6978eb76e9c8b5, 0x1cd76a9f9dc57b2f, 0xdf7e2b1897268ae3, 0xbd28954a8e4fa937,
    0x81f6b3495adc2e7b, 0xedc7b169287b1c35, 0x48e912dc9a26ced1, 0x25ca1b8ebdf36251,
    0x921b378e29b83ecf, 0xb87d1ae58cf6de41, 0x562a91c78b9d25a1, 0x97bfa6d5736ad9c1,
    0x4bc613e8ad9b3175, 0xf45d7c81ae4f1637, 0x1c8564b297b863a5, 0x1568acbf84a972d3,
    0xa82d9ec7eb368275, 0x42658be921ab4689, 0x5e73bfc48da1c649, 0x8ef194daf8c6db53,
    0xd8452fe1db9a73c1, 0xd24c3fae9ebaf417, 0xb456ad91ae832df5, 0x1a2f6cd541b2e853,
    0x4165e97341782c3f, 0x358bfc918a37694f, 0xb9d86c349b687435, 0xc1b27edf73f1ac2b,
    0xf124bd7935f4ba61, 0x84a972167c134e59, 0xa273f4c67328b5ed, 0xfe879653fa738259,
    0x8b19fd53a2d9f745, 0x4d9871b2b4951e6f, 0x6be8341dacf46251, 0x417e59b2d2e8a6b1,
    0xe7dc1a4fba21de39, 0xb6c4f257a136e247, 0xab371e95c178fe95, 0xa53491dbe8129567,
    0xa257e1cfc9eb4563, 0x3825d6fca94ed2b1, 0x8a1564cebd814c73, 0xfed5621c6d815439,
    0xe4a26d989738d5af, 0xd3eafb845acb187d, 0xb419de26a13c8b95, 0x7ea1d93619362c7b,
    0x67f453c92b1f53d9, 0x2f94b56e3ce1b7a5, 0xd185feb3e2c94d6f, 0xeabf93d7b43e2d97,
    0x4c9bd5a29fb5e13d, 0x52ae3b7fedac1b35, 0xc64129a81f4285eb, 0x9ad4cf5861f9edc3,
    0x4b61253fa9ef1c2d, 0x89bc27e4aedc379f, 0x45f37a9e529b648f, 0x8793c14f5e21af6d,
    0xe5a872fb6eaf87d1, 0xa63ce58913bd4fc7, 0x5d7bc23ab9c6f78d, 0x53d814ec3cfae925,
    0x31e5468daf7b1e35, 0x36b4ef785ea23c6f, 0xb6527f14c82f7b65, 0x576e14ba2a61decf,
    0xdb2f5eac2c3b71ad, 0x27e41dbf246e378f, 0xcbaf3179894ce1b7, 0x267d153458e6b12f,
    0x3fc21b74597fb3c1, 0xe39d1a85f16249e3, 0xdbf731ca4357d8c9, 0x976c2df56bfea9d5,
    0x426d1cb9c246e183, 0x1a926cf4afc8763d, 0x193a576bf51ec467, 0x54beac187132e485,
    0xab27e9687b863921, 0xa6c7b23f68e29cab, 0x2b5a46389e48b613, 0x6fc7b14923cab4e1,
    0xc659be386241f79d, 0xd1728f3512386bf7, 0x7e98b5a42b67358d, 0xa5d467be53bcf9a1,
    0xd6f39bc561984aeb, 0xf21cd53e68c1a5e3, 0x6e39d4b2e6184b7d, 0x9f7c6b51d14e9f67,
    0xd2c81f69154bd2a7, 0xf28cd74ec12345af, 0x4c75d2364d98c1a5, 0x9a85def48152a693,
    0x982c3ae7b1d62385, 0xe169b37d51e9f6a3, 0xaf97b16dcef6a487, 0x64ef5198ea167c5b,
    0xab43cd15a6845b91, 0xb523a81d5b4e72fd, 0xc47d2689df7513eb, 0x7fc5891bf2587dc3,
    0x87b4e591d68e9fb1, 0x3f7cb1aec89d23bf, 0x8fd15a2c3c4d29a5, 0x43cf8e2739af1c4b,
    0xc73f4b62a2594f7b, 0x4db37ca6fe284cb3, 0x19df7583b14a69d7, 0xa4ed61592ba71fe3,
    0xb63cf57ea5f1879b, 0x6f281ce9d26fe8a7, 0xe25f873cd7618f93, 0xcf8537948f26b1e5,
    0x1af7b28628cb76e5, 0x69c5d328b81aef79, 0x97e124fbd23564af, 0xc9d5b482e9b6815d,
    0xe3fab147c72b954d, 0xb1d43ce6e3afb819, 0xcf286e41c7853fbd, 0x89a7eb352d1a53f9,
    0x7b9f283621cd3a59, 0xa8be529173bcda21, 0x8dcf24be7f85634d, 0xc328b9d4241fa7e9,
    0x21fb6e4d35782cd1, 0x873d41fa5a1c768b, 0xc17e4839e8a72c15, 0x9714ea68be92da4f,
    0x85b4267fe92bf867, 0xaefd15862ad854f1, 0xb52a7f36fb17e263, 0x7faedc632674becd,
    0x7bfd324146328de9, 0x7eaf9b65f826ea71, 0x91e28b3d39f2e4bd, 0x36f91c856cb8a41f,
    0x2759a8db4de62fab, 0xc5f3be4dcab4312d, 0xb8c34fe6fa28d4c1, 0x7da325c12e4ab687,
    0xc92a7d36cad916b3, 0xb4fd28737bf93e6d, 0x5fd1be821cdafbe3, 0x3f9a4b17a836e297,
    0x6e591bd7f942b6ad, 0xda14578ca2be1539, 0xd54c7296f89abec5, 0xef653174a4be8c75,
    0xcfd64215ce84a6d5, 0x6218ef952a1f7863, 0xeb6493a86a5d9e87, 0xe19f2d643a6d8cf9,
    0xad3c4562e2897fb5, 0xf79c4ea514b2ac39, 0x1af9c6e4c9b6ea85, 0xa479eb1fe81b763f,
    0xa48623f1d98c74ef, 0x2647bcd37c5962db, 0xab7c95fe925fda31, 0xe219a3f5fb5126e3,
    0x9e4a726f2c378641, 0x614e38a9852cd3eb, 0x9532d4af4c85dfe9, 0x7863a1ecf37296c5,
    0x862abf1cb8e64c9d, 0x8e127564c326d7eb, 0xe492f37c352b7c9d, 0x8b49a37272edab81,
    0x8d17ebca7e654a2d, 0xb913874ca3f5296b, 0xc8ef6b326c472ba9, 0x75e632183592ec6b,
    0x1a2c493d3897ac61, 0x8165d2a948e21a35, 0xe49bc257fe13468d, 0x417e5d38c497da6f,
    0x19fe628c61a8d74b, 0xa6cb3d1fa3816ced, 0x6d41b53cf5bce789, 0xdfb324796b2f53d9,
    0xe6d2f81415ec487d, 0xe23baf1cfad2e53b, 0x7f8eb14c1f3748cd, 0x316ab2fed46ae39f,
    0x8173b4fa49fba5d7, 0x3fc79bde5e46387f, 0x2a975d34f2c84971, 0x6ef29d78eb423c87,
    0xa5641f2ef9a2c4d3, 0xb85de96c65ebd8a1, 0x45becf93a4381d2f, 0x72ac65d36d1b32c9,
    0x4c26e5dbf3a4618b, 0x1a836cfbf4629817, 0x7d843f168f792351, 0x98675ceaeb6394f5,
    0x6e4d87abe31627cf, 0x64fbe7d24a2351b7, 0xb5398fa4ae62193f, 0x297cb4df5c7b826d,
    0xd61c8e94c2a49835, 0x8376ea9425eb4931, 0xe62c8154e5689a3f, 0x943e68fb352d769f,
    0x4387fa6c4db7f235, 0xc72965e1e8416caf, 0x431627eacbda278f, 0x978ad3c4edf63ab5,
    0x2f1a3498186bd259, 0x9fae4618527936eb, 0x4ea9c53d8cb9d521, 0x89761cfa2b47c3af,
    0xb56c9f34ad38274f, 0x72d1a43b24ae91d7, 0x2afc85e18a647d39, 0x1abf95d4b43a5e8d,
    0x3f92dc4afb765e93, 0x1ce365f8274569e1, 0xea4fc738a41d76b9, 0x83cb57e2ef9184a3,
    0x14e936f2df234179, 0x43ea879d36e495ad, 0xa612d9ebaeb681c5, 0xbd8f539a78edc2a1,
    0x2f17dc9ab7c8156f, 0x3ad216b84657dfab, 0x7ed4ab5631fd6829, 0xc62f85b9687b1c9f,
    0xa21b3f56a8e4c675, 0x64a819d3e79af6bd, 0xf532dea612685c79, 0xbcf49e1564d3c27f,
    0x13c6ea57378b9acf, 0x714e598ab3542e6f, 0xd283bcaf7db6c1e5, 0x87e34b61e12ca583,
    0x3418b2dc18a374f5, 0xc6eb97a27529abcd, 0x6ad8c4b329de1537, 0x6c3d927ae8196af5,
    0x9234e51db3daf125, 0x16c327aba83d1c4b, 0xa256fd9ea4b83ce5, 0xfe31689578ba6123,
    0x6415bfd25768bfa3, 0xa9452e6d6cf9b271, 0xcba51476f8bad631, 0x7eb68c51215d8e97,
    0xfa641c5d97468e31, 0xb49af572e1547b93, 0xf3db826e3487eb69, 0xce475619e2937bf1,
    0xba53921f3a156bc7, 0xd31e7b524fd986b5, 0xac7529ed31879f6b, 0x5bc84e17164a28d7,
    0x639fdb1a784f13ab, 0x8ec673b24a53d6f1, 0x8d57ac31a46759cb, 0x3b2ea641bd367f45,
    0xbc73a2f8351c49fb, 0x4da78ce53a28d4b7, 0x3e7ac9b5c62a5fb3, 0x4d1fc798fd213a9b,
    0x4ea3b17d28e7bc69, 0xb12396fe3697a1eb, 0x1fe2d674c2e3d497, 0x9ec37daf5ef6cd4b,
    0xe64d83752d631497, 0xefb625a824d956eb, 0x4c392d8ba843f129, 0xf6abd39c14bce5fd,
    0x437d9bfe431f2ecb, 0xd92bc4fe75eacf21, 0xcf8ead13b72d4ac1, 0x21837cad1a47e2fd,
    0xc9768a1dbc623a89, 0x2ad6934e56ef9137, 0xb48a7cfed6549c21, 0xd9281b4f48cbe21d,
    0xabfde7359a213c6b, 0x14ced293c196e23d, 0x7d15849613a64cdf, 0xc9ea25f3c5ef629d,
    0xc87214dac72965a1, 0xb12537a68479c315, 0xf9754816ac5d2f49, 0xe94afdb2dc6135e7,
    0x3fd18579bc48271f, 0x298c6a57ac4e17d3, 0x81b7546ae1c2dba9, 0x8d746acfc5e62f47,
    0x3f6527a95c492a1b, 0xe35b891d936b1efd, 0x49fed1864c2dfea5, 0x67efd359f1ed3497,
    0xb829e3dcd42936bf, 0xb5f1d6cacb43859f, 0x6ebc19254d856c19, 0x4ae3b6f9541267e9,
    0xf318ad5cd6e21fcb, 0xb1f2479ce8649d5b, 0x37162ced7956d8b1, 0x1e85cda4537f8261,
    0x29e6b51792a76fc5, 0x93ea48c712e8b6f3, 0xc5f19deae94b6a7d, 0x1d9c4378b3982e17,
    0xbe354a6f638fae91, 0xe8764ad58f64315b, 0xb74369e21c3db265, 0xc41e5b7dcdf52491,
    0xf7ea35b61cdfa4eb, 0xfa461c2ec2d853a7, 0x12b7e49d4b92e6a7, 0xad6b9ce35e1c4973,
    0x1a24859f8e6a423f, 0x8a51dfe6f9d378e5, 0xfe2d9b54143d627f, 0xd49861faec214a35,
    0xedcb89a37186c4ab, 0xdf538a4e1627ead5, 0xaf1769c2eda85c6b, 0x7ce6f5a19f725ba3,
    0xc7346db81d56fa73, 0x6c9a74237c54d8f9, 0xba3f5d74da854e9b, 0x8c6bda253124f6c5,
    0xbf3714da7c23a591, 0x9e871f2b483cb51d, 0x84b5371c235cf64d, 0x7bc6fe381a3f8db7,
    0xb3c17a2f8ec574a1, 0xad857964cfe85931, 0xa4c1fd23da5e463b, 0x8439e7b2452ac961,
    0x8963174d95be8147, 0x46d3f95b4b25e793, 0x6a13ebd48dc6a347, 0xa7d1f8931ea6548f,
    0x1954c6d752fbed39, 0x37a84db19f1ad647, 0x8ab35f164c8e7df3, 0xe456b1376b318dc7,
    0x7e198df4fec28753, 0xbedc84f913972bed, 0xcfe7639db367e41d, 0xcba84d379c8e1afb,
    0x1e63cdaf35fa689b, 0x64cf15984e83fac5, 0x81f76ec56d183fa7, 0xac572e63b62cf1a7,
    0x57ce9a23fa68bc9d, 0xc42f75a8b968ea7d, 0xbd54c187dc58e217, 0xcf4152b39478af61,
    0xfb251974ea3c9f47, 0xc21ef95825cfb847, 0xb1e8ad656129e4f3, 0xdf21e7c8a16e235b,
    0xf541ea2839efa54b, 0x43d1f52e2eb5f4a3, 0x8d3be47ae597c32d, 0x93284b76be53687d,
    0xf49e6b8134d6921b, 0x347e6f591346dae7, 0x4af12c37b57a14cf, 0x4152d8eaf8ba7c31,
    0x2bc3df195a7b931d, 0x1c6e8b4369c71a53, 0x7bd3c9ae8fe17a4b, 0x4dbe9a135cb48267,
    0x46e758db359b2c4f, 0x1d4f8759db6c871f, 0x1be72a58fcd1593b, 0x1c4867921cb534f7,
    0x3c84a2f123758bef, 0x6a812453c31df7b5, 0x91f6324cbe647589, 0x8d4c3769cf478215,
    0x34db291cb1c6e9fd, 0x5378dfa6f2ea31b9, 0x5a86c917fc948d17, 0xe5df72647fa469db,
    0x8743b52c76d2c385, 0x638ec574cd9a4f15, 0x9256dea1ea47598b, 0x8d1e3796da6e4f85,
    0x41e295cae62d18c7, 0x67c19a5b289cf1eb, 0x9eb48a265ec81d39, 0xbf9c28dae836b791,
    0x2f58d3b6ac57491d, 0x7c39b64d8574d21f, 0x18d9f23c26d1e397, 0x367fa2e58b1276e5,
    0x5c3f9178be485c6f, 0x1eac36df153dfa89, 0x3d9e746ac9e716ab, 0x18e65972e9143d2b,
    0x1d9eca628a4b9fe3, 0x6cae43d7c671d9e5, 0xb42d76139365d28b, 0x1be4796a41a35cf7,
)
